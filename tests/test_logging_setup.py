"""Tests for logging configuration."""

from __future__ import annotations

import io

import pytest
import structlog

from typedbrep.logging_setup import CONFIGS, configure_logging, configure_preset, get_logger


@pytest.mark.usefixtures("restore_test_logging")
class TestConfigureLogging:
    """Test cases for structlog configuration."""

    def test_json_output(self, capsys):
        """Test JSON rendering writes one JSON event per line."""
        configure_logging(level="INFO", enable_json=True)
        get_logger("test").info("Loft committed", wires=3)

        out = capsys.readouterr().out
        assert '"event": "Loft committed"' in out
        assert '"wires": 3' in out

    def test_level_filters_events(self, capsys):
        """Test events below the configured level are dropped."""
        configure_logging(level="WARNING", enable_json=True)
        logger = get_logger("test")
        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_extra_processors(self, capsys):
        """Test extra processors run before rendering."""
        def add_component(logger, method_name, event_dict):
            event_dict["component"] = "typedbrep"
            return event_dict

        configure_logging(enable_json=True, extra_processors=[add_component])
        get_logger("test").info("event")

        assert '"component": "typedbrep"' in capsys.readouterr().out

    def test_custom_stream(self, capsys):
        """Test events go to the given stream instead of stdout."""
        stream = io.StringIO()
        configure_logging(enable_json=True, stream=stream)
        get_logger("test").info("Fillet committed", edges=12)

        assert '"edges": 12' in stream.getvalue()
        assert capsys.readouterr().out == ""

    def test_presets(self):
        """Test every preset can be applied."""
        for name in CONFIGS:
            configure_preset(name)
        assert structlog.is_configured()

    def test_unknown_preset(self):
        """Test unknown preset names are rejected."""
        with pytest.raises(KeyError, match="Unknown logging preset"):
            configure_preset("staging")
