"""
app_main.py - Caesar Cipher メインアプリケーション
Caesar Cipher v1.0
"""

import logging

import flet as ft

from caesar_app.config import (
    APP_TITLE,
    APP_VERSION,
    COLOR_BG,
    COLOR_PRIMARY,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from caesar_app.domain.events import Direction, DirectionChanged, Event, ShiftChanged
from caesar_app.services import sync_service
from caesar_app.ui import views
from caesar_app.ui.components.shift_stepper import ShiftStepper
from caesar_app.ui.components.text_panel import TextPanel
from caesar_app.ui.helpers import edit_event
from caesar_app.ui_state import AppState

logger = logging.getLogger(__name__)


# ==========================================================================
# メインアプリ
# ==========================================================================


def main(page: ft.Page):
    page.title = APP_TITLE
    page.window.width = WINDOW_WIDTH
    page.window.height = WINDOW_HEIGHT
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    state = AppState()
    panels: dict[str, TextPanel] = {}
    stepper_ref = ft.Ref[ShiftStepper]()

    def show_error(exc: Exception):
        page.overlay.append(
            ft.AlertDialog(
                title=ft.Text("An error occurred"),
                content=ft.Text(f"Details: {exc}"),
                open=True,
            )
        )
        page.update()

    def render():
        """Full view rebuild, used when the active field changes."""
        try:
            page.views.clear()
            page.views.append(
                views.build_cipher_view(
                    state,
                    panels,
                    stepper_ref,
                    on_direction_change=on_direction_change,
                    on_shift_commit=on_shift_commit,
                    on_text_edit=on_text_edit,
                )
            )
            page.update()
        except Exception as exc:
            logger.exception("Error in render")
            show_error(exc)

    def sync_controls():
        """Push state into the existing controls without rebuilding the view."""
        for field, panel in panels.items():
            panel.set_value(getattr(state, field))
        if stepper_ref.current is not None:
            stepper_ref.current.set_value(state.shift)
        page.update()

    def dispatch(event: Event):
        previous = state.direction
        sync_service.handle(state, event)
        if state.direction is not previous:
            render()
        else:
            sync_controls()

    def on_direction_change(e: ft.ControlEvent):
        dispatch(DirectionChanged(Direction(e.control.value)))

    def on_shift_commit(value: int):
        dispatch(ShiftChanged(value))

    def on_text_edit(field: str, text: str):
        dispatch(edit_event(field, text))

    logger.info("%s v%s started", APP_TITLE, APP_VERSION)
    render()


# ==========================================================================
# エントリーポイント
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
