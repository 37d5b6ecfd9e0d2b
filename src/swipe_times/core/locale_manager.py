# core/locale_manager.py

import json
from typing import Dict, Any, List
import importlib.resources as pkg_resources
from nicegui import app
from swipe_times.core.log_manager import logger

# The directory where locale files (e.g., en.json) are stored.
I18N_PACKAGE_REF = pkg_resources.files('swipe_times.i18n')

FALLBACK_LOCALE = 'en'
LANGUAGE_STORAGE_KEY = 'ui_language'


class LocaleManager:
    """
    Loads every locale file shipped in swipe_times.i18n and translates keys for
    the locale stored in the NiceGUI user session ('ui_language').
    """

    def __init__(self, package_ref=I18N_PACKAGE_REF):
        self._package_ref = package_ref
        self._fallback_translations: Dict[str, str] = {}
        self._all_translations: Dict[str, Dict[str, str]] = {}

        # 1. Load fallback first for guaranteed coverage
        self._fallback_translations = self._load_translations(FALLBACK_LOCALE)
        self._all_translations[FALLBACK_LOCALE] = self._fallback_translations

        # 2. Discover the remaining locales
        try:
            for path in self._package_ref.iterdir():
                if path.name.endswith('.json'):
                    locale_code = path.name[:-len('.json')]
                    if locale_code not in self._all_translations:
                        self._all_translations[locale_code] = self._load_translations(locale_code)
        except OSError as e:
            logger.error(f"Error during locale discovery: {e}")

        logger.info(f"LocaleManager initialized. Supported: {list(self._all_translations.keys())}. Fallback: {FALLBACK_LOCALE}")

    def _load_translations(self, locale: str) -> Dict[str, str]:
        file_name = f'{locale}.json'

        try:
            file_path = self._package_ref / file_name
            with file_path.open('r', encoding='utf-8') as f:
                data = json.load(f)
                if not isinstance(data, dict):
                    raise TypeError("Translation file root must be a dictionary.")
                logger.debug(f"Loaded translations for locale '{locale}'.")
                return data
        except FileNotFoundError:
            logger.warning(f"Translation resource not found for locale '{locale}' ({file_name}).")
            return {}
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON format in file for locale '{locale}': {e}")
            return {}
        except TypeError as e:
            logger.error(f"Unusable translation file for locale '{locale}': {e}")
            return {}

    @property
    def supported_locales(self) -> List[str]:
        return list(self._all_translations.keys())

    def current_locale(self) -> str:
        """The locale of the connected user, or the fallback outside a page context."""
        try:
            return app.storage.user.get(LANGUAGE_STORAGE_KEY, FALLBACK_LOCALE)
        except RuntimeError:
            # app.storage.user is only available while serving a page
            return FALLBACK_LOCALE

    def T(self, key: str, use_fallback=False, **kwargs: Any) -> str:
        """
        Translates `key` for the active locale.

        Args:
            key: The identifier key for the string to translate.
            use_fallback: Skip the session lookup and translate in the fallback locale.
            **kwargs: Variables for string interpolation.

        Returns:
            The translated string, or "!! key !!" if no locale knows the key.
        """
        current_locale = FALLBACK_LOCALE if use_fallback else self.current_locale()

        translations = self._all_translations.get(current_locale, {})
        translated_string = translations.get(key)

        if translated_string is None:
            translated_string = self._fallback_translations.get(key)
            if translated_string is None:
                logger.warning(f"Missing translation key '{key}' in both '{current_locale}' and fallback locales.")
                return f"!! {key} !!"
            logger.warning(f"Missing translation key '{key}' in locale '{current_locale}'.")

        if kwargs:
            try:
                return translated_string.format(**kwargs)
            except (KeyError, IndexError, ValueError) as e:
                logger.error(f"Formatting failed for key '{key}' in locale '{current_locale}': {e}")
                return translated_string

        return translated_string


# Globally accessible singleton instance
global_locale_manager = LocaleManager()

# Short alias for translation in UI files
T = global_locale_manager.T

SUPPORTED_LOCALES = global_locale_manager.supported_locales
