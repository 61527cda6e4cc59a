import flet as ft
from caesar_app.config import (
    BORDER_RADIUS_BTN,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_READONLY,
    COLOR_TEXT_MUTED,
    TEXT_PANEL_HEIGHT,
)
from caesar_app.ui.helpers import FIELD_COLORS, FIELD_TITLES


class TextPanel(ft.Container):
    """Titled multi-line field for plaintext or ciphertext."""

    def __init__(self, field: str, role: str, value: str, on_edit):
        super().__init__()
        self.field = field
        self.role = role
        self.on_edit = on_edit
        self.is_output = role != "Input"

        self.text_input = ft.TextField(
            value=value,
            multiline=True,
            min_lines=8,
            max_lines=8,
            height=TEXT_PANEL_HEIGHT,
            read_only=self.is_output,
            bgcolor=COLOR_READONLY if self.is_output else COLOR_CARD,
            border_color=COLOR_BORDER,
            focused_border_color=FIELD_COLORS[field] if not self.is_output else COLOR_BORDER,
            border_radius=BORDER_RADIUS_BTN,
            content_padding=ft.Padding.all(12),
            text_size=14,
            on_change=self._on_change,
        )

        self.content = self._build_content()

    def _build_content(self):
        return ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Text(
                            FIELD_TITLES[self.field],
                            size=18,
                            weight=ft.FontWeight.W_600,
                            color=FIELD_COLORS[self.field],
                            expand=True,
                        ),
                        ft.Text(
                            self.role,
                            size=16,
                            weight=ft.FontWeight.W_600,
                            color=COLOR_PRIMARY if not self.is_output else COLOR_TEXT_MUTED,
                        ),
                    ],
                ),
                self.text_input,
            ],
            spacing=8,
        )

    def _on_change(self, e):
        self.on_edit(self.field, e.control.value or "")

    def set_value(self, value: str) -> None:
        if self.text_input.value != value:
            self.text_input.value = value
