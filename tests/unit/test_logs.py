"""Tests for structlog configuration."""

import json

import pytest

from raymath.errors import DivisionByZero
from raymath.logs import configure_logging
from raymath.math.wad_ray import wad_div


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_hides_debug_events(self, clean_logging, capsys):
        """Without verbose, raymath's debug events are filtered out."""
        configure_logging(log_json=True)
        with pytest.raises(DivisionByZero):
            wad_div(1, 0)
        assert capsys.readouterr().err == ""

    def test_verbose_shows_debug_events(self, clean_logging, capsys):
        """verbose=True lets the division-by-zero event through."""
        configure_logging(verbose=True, log_json=True)
        with pytest.raises(DivisionByZero):
            wad_div(1, 0)
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "fixed_point_division_by_zero"
        assert record["operation"] == "wad_div"
        assert record["level"] == "debug"
        assert "timestamp" in record

    def test_console_output(self, clean_logging, capsys):
        """The default renderer writes human-readable lines to stderr."""
        configure_logging(verbose=True)
        with pytest.raises(DivisionByZero):
            wad_div(1, 0)
        assert "fixed_point_division_by_zero" in capsys.readouterr().err
