import flet as ft
from caesar_app.config import (
    BORDER_RADIUS_BTN,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_PRIMARY,
    SHIFT_MAX,
    SHIFT_MIN,
)
from caesar_app.ui.helpers import parse_shift


class ShiftStepper(ft.Container):
    """Numeric text field with -/+ buttons, SHIFT_MIN..SHIFT_MAX, no wraparound."""

    def __init__(self, value: int, on_commit):
        super().__init__()
        self.committed = value
        self.on_commit = on_commit

        self.shift_input = ft.TextField(
            value=str(value),
            width=70,
            text_align=ft.TextAlign.CENTER,
            keyboard_type=ft.KeyboardType.NUMBER,
            border_color=COLOR_BORDER,
            focused_border_color=COLOR_PRIMARY,
            border_radius=BORDER_RADIUS_BTN,
            bgcolor=COLOR_CARD,
            content_padding=ft.Padding.symmetric(horizontal=8, vertical=8),
            on_change=self._on_text_change,
            on_submit=self._on_text_done,
            on_blur=self._on_text_done,
        )
        self.dec_button = ft.IconButton(
            icon=ft.Icons.REMOVE,
            icon_color=COLOR_PRIMARY,
            tooltip="Shift - 1",
            on_click=lambda _e: self._step(-1),
        )
        self.inc_button = ft.IconButton(
            icon=ft.Icons.ADD,
            icon_color=COLOR_PRIMARY,
            tooltip="Shift + 1",
            on_click=lambda _e: self._step(1),
        )
        self._sync_buttons()

        self.content = ft.Row(
            controls=[self.shift_input, self.dec_button, self.inc_button],
            spacing=4,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

    def _sync_buttons(self) -> None:
        self.dec_button.disabled = self.committed <= SHIFT_MIN
        self.inc_button.disabled = self.committed >= SHIFT_MAX

    def _step(self, delta: int) -> None:
        new_value = self.committed + delta
        if new_value < SHIFT_MIN or new_value > SHIFT_MAX:
            return
        self.on_commit(new_value)

    def _on_text_change(self, e):
        value = parse_shift(e.control.value)
        # partial or non-numeric entry is not committed
        if value is None or value == self.committed:
            return
        self.on_commit(value)

    def _on_text_done(self, e):
        # restore the committed value if the field was left invalid or clamped
        self.set_value(self.committed, force_text=True)
        if self.page:
            self.update()

    def set_value(self, value: int, force_text: bool = False) -> None:
        """Show the committed shift. Text being typed is kept unless forced."""
        self.committed = value
        if force_text or parse_shift(self.shift_input.value) != value:
            self.shift_input.value = str(value)
        self._sync_buttons()
