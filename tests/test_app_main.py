from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from caesar_app import app_main
from caesar_app.ui import views


@pytest.fixture
def app(monkeypatch):
    """Run app_main.main on a mock page and capture what the view builder got."""
    built = []
    original = views.build_cipher_view

    def spy(state, panels, stepper_ref, **callbacks):
        view = original(state, panels, stepper_ref, **callbacks)
        built.append(
            SimpleNamespace(
                state=state, panels=panels, stepper_ref=stepper_ref, **callbacks
            )
        )
        return view

    monkeypatch.setattr(views, "build_cipher_view", spy)
    page = MagicMock()
    app_main.main(page)
    return SimpleNamespace(page=page, built=built)


def _panel_value(app, field):
    return app.built[-1].panels[field].text_input.value


def test_initial_render(app):
    assert len(app.built) == 1
    assert list(app.built[0].panels) == ["plaintext", "ciphertext"]
    assert app.built[0].stepper_ref.current.shift_input.value == "6"


def test_plaintext_edit_updates_ciphertext_panel(app):
    app.built[-1].on_text_edit("plaintext", "abc")
    assert _panel_value(app, "ciphertext") == "ghi"
    # in-place update, no rebuild
    assert len(app.built) == 1


def test_rejected_edit_is_pushed_back_into_control(app):
    ui = app.built[-1]
    ui.on_text_edit("plaintext", "abc")
    ui.panels["ciphertext"].text_input.value = "zzz"
    ui.on_text_edit("ciphertext", "zzz")
    assert _panel_value(app, "ciphertext") == "ghi"
    assert ui.state.plaintext == "abc"


def test_direction_change_rebuilds_with_swapped_panels(app):
    app.built[-1].on_text_edit("plaintext", "abc")
    event = SimpleNamespace(control=SimpleNamespace(value="decrypt"))
    app.built[-1].on_direction_change(event)
    assert len(app.built) == 2
    assert list(app.built[-1].panels) == ["ciphertext", "plaintext"]
    assert _panel_value(app, "plaintext") == "abc"
    assert _panel_value(app, "ciphertext") == "ghi"
    assert app.built[-1].panels["plaintext"].text_input.read_only is True


def test_clamped_shift_is_written_back_to_stepper(app):
    ui = app.built[-1]
    ui.on_text_edit("plaintext", "abc")
    ui.on_shift_commit(40)
    assert ui.stepper_ref.current.shift_input.value == "25"
    assert ui.state.shift == 25
    assert _panel_value(app, "ciphertext") == "zab"
