from nicegui import app, ui

from swipe_times.core.locale_manager import T, SUPPORTED_LOCALES, LANGUAGE_STORAGE_KEY


def setup_page():
    ui.dark_mode()  # Enable dark mode globally. For now, we keep it here.
    ui.add_head_html("<style>html, #c3 { padding: 0 !important;}</style>")  # Remove default padding
    ui.add_css('''
        .gradient-bg { background: linear-gradient(160deg, #1e1b4b 0%, #0f172a 60%, #020617 100%); }
        .swipe-card { touch-action: pan-y; user-select: none; }
    ''')


def _set_language(locale: str):
    app.storage.user[LANGUAGE_STORAGE_KEY] = locale
    ui.navigate.reload()


def create_navbar():
    with ui.header().classes('w-full bg-black text-white justify-between items-center px-6 py-2 shadow-md'):
        ui.label(T("app_title")).classes('text-xl font-bold tracking-tight')

        with ui.button(icon='translate').props('flat round color=white'):
            ui.tooltip(T("language")).classes('bg-black text-xs')
            with ui.menu().props('auto-close'):
                for locale in SUPPORTED_LOCALES:
                    ui.menu_item(T(f"lang_{locale}"), on_click=lambda loc=locale: _set_language(loc))
