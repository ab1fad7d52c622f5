"""
Page tests for streamlit_app/app.py - Form edits, reset and sidebar overrides.
"""
import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = "streamlit_app/app.py"


@pytest.fixture
def app(monkeypatch):
    monkeypatch.delenv("RAID_DEBUFF_VARIANT", raising=False)
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _metrics(at):
    return [m.value for m in at.metric]


class TestDefaults:
    """Tests for the first render."""

    def test_default_result(self, app):
        """100 vs 100 shows 0 difference and 92.01%."""
        assert _metrics(app)[:2] == ["0", "92.01%"]
        assert app.text_input(key="accuracy_input").value == "100"
        assert app.text_input(key="resistance_input").value == "100"

    def test_sidebar_shows_active_formula(self, app):
        assert "Calibrated (3-97% caps)" in app.sidebar.caption[0].value


class TestStatEdits:
    """Tests for editing Accuracy / Resistance."""

    def test_valid_edit_updates_result(self, app):
        app.text_input(key="accuracy_input").set_value("58").run()
        assert _metrics(app)[:2] == ["-42", "50.00%"]
        assert len(app.warning) == 0

    def test_rejected_edit_restores_box_and_warns(self, app):
        app.text_input(key="accuracy_input").set_value("abc").run()

        assert app.text_input(key="accuracy_input").value == "100"
        assert len(app.warning) == 1
        assert "Keeping previous value 100" in app.warning[0].value
        assert _metrics(app)[:2] == ["0", "92.01%"]

    def test_valid_edit_clears_warning(self, app):
        app.text_input(key="accuracy_input").set_value("abc").run()
        app.text_input(key="accuracy_input").set_value("90").run()
        assert len(app.warning) == 0
        assert _metrics(app)[0] == "-10"


class TestReset:
    """Tests for the reset button."""

    def test_reset_restores_defaults(self, app):
        app.text_input(key="accuracy_input").set_value("58").run()
        app.text_input(key="resistance_input").set_value("120").run()
        assert _metrics(app)[0] == "-62"

        app.button[0].click().run()

        assert app.text_input(key="accuracy_input").value == "100"
        assert app.text_input(key="resistance_input").value == "100"
        assert _metrics(app)[:2] == ["0", "92.01%"]


class TestParameterOverrides:
    """Tests for the sidebar calibration inputs."""

    def test_override_changes_result(self, app):
        app.number_input(key="param_calibrated_midpoint").set_value(0.0).run()
        assert _metrics(app)[1] == "50.00%"

    def test_invalid_override_falls_back_to_defaults(self, app):
        """min_cap above max_cap is reported and the default curve is used."""
        app.number_input(key="param_calibrated_min_cap").set_value(0.99).run()

        assert len(app.error) == 1
        assert "Invalid parameters" in app.error[0].value
        assert _metrics(app)[1] == "92.01%"
