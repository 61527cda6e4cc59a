import logging
import sys

from caesar_app.config import LOG_FORMAT, LOG_LEVEL

# ロギング設定
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
)

if __name__ == "__main__":
    import flet as ft
    from caesar_app.app_main import main

    try:
        ft.app(target=main)
    except Exception:
        logging.exception("Unhandled exception running Flet app")
        # exit with non-zero so local runs notice failure; CI will also log
        sys.exit(1)
