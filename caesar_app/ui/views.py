"""
views.py - UI view builder
Single responsibility: build the flet View from state and wire callbacks.
"""

import flet as ft

from caesar_app.config import (
    APP_TITLE,
    COLOR_BG,
    COLOR_BORDER,
    COLOR_SIDEBAR,
    COLOR_TEXT_MAIN,
    SIDEBAR_WIDTH,
)
from caesar_app.domain.events import Direction
from caesar_app.ui.components.shift_stepper import ShiftStepper
from caesar_app.ui.components.text_panel import TextPanel
from caesar_app.ui.helpers import panel_order


def build_sidebar(state, stepper: ShiftStepper, on_direction_change) -> ft.Container:
    conversion_picker = ft.RadioGroup(
        value=state.direction.value,
        on_change=on_direction_change,
        content=ft.Column(
            controls=[
                ft.Radio(value=d.value, label=d.label)
                for d in (Direction.ENCRYPT, Direction.DECRYPT)
            ],
            spacing=4,
        ),
    )

    return ft.Container(
        width=SIDEBAR_WIDTH,
        bgcolor=COLOR_SIDEBAR,
        border=ft.Border.all(1, COLOR_BORDER),
        padding=ft.Padding.symmetric(horizontal=20, vertical=10),
        content=ft.Column(
            controls=[
                ft.Text(
                    APP_TITLE,
                    size=26,
                    weight=ft.FontWeight.BOLD,
                    color=COLOR_TEXT_MAIN,
                ),
                ft.Container(height=30),
                ft.Text("Conversion Type:", color=COLOR_TEXT_MAIN),
                conversion_picker,
                ft.Container(height=12),
                ft.Text("Shift:", color=COLOR_TEXT_MAIN),
                stepper,
            ],
            spacing=8,
            horizontal_alignment=ft.CrossAxisAlignment.START,
        ),
    )


def build_cipher_view(
    state,
    panels: dict[str, TextPanel],
    stepper_ref: ft.Ref[ShiftStepper],
    on_direction_change,
    on_shift_commit,
    on_text_edit,
) -> ft.View:
    """
    Build the main view. The active field is placed first as "Input".

    ``panels`` and ``stepper_ref`` are filled with the created controls so the
    caller can push state changes into them without rebuilding the view.
    """
    stepper = ShiftStepper(state.shift, on_commit=on_shift_commit)
    stepper_ref.current = stepper

    panels.clear()
    for field, role in panel_order(state):
        panels[field] = TextPanel(
            field=field,
            role=role,
            value=getattr(state, field),
            on_edit=on_text_edit,
        )

    text_column = ft.Container(
        expand=True,
        padding=ft.Padding.only(left=20, top=10, right=10, bottom=10),
        content=ft.Column(
            controls=list(panels.values()),
            spacing=16,
        ),
    )

    return ft.View(
        route="/",
        bgcolor=COLOR_BG,
        padding=0,
        controls=[
            ft.Row(
                controls=[
                    build_sidebar(state, stepper, on_direction_change),
                    text_column,
                ],
                spacing=0,
                expand=True,
                vertical_alignment=ft.CrossAxisAlignment.STRETCH,
            )
        ],
    )
