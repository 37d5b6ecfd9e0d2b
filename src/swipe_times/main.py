# main.py
from nicegui import ui

from swipe_times.config import SECRET_KEY, PORT, RELOAD
from swipe_times.core.locale_manager import T
from swipe_times.core.log_manager import logger

# --- PAGE REGISTRATION ---
import swipe_times.pages.drill_page  # noqa: F401


def run(reload: bool = False):
    logger.info(f"Starting Swipe Times on port {PORT}.")
    ui.run(title=T("app_title", use_fallback=True), reload=reload, port=PORT, storage_secret=SECRET_KEY)


# --- STARTUP ---
if __name__ in {"__main__", "__mp_main__"}:
    run(reload=RELOAD)
