"""Unit tests for vaultviews.helpers.logging_helper."""

from __future__ import annotations

import logging

import pytest

from vaultviews.helpers.logging_helper import configure_logging, sanitize_exception_message


class TestSanitizeExceptionMessage:
    """Tests for sanitize_exception_message()."""

    @pytest.mark.unit
    def test_returns_safe_message(self) -> None:
        error = OSError("/home/me/vault/Things/x.md: permission denied")
        assert sanitize_exception_message(error, "Could not read vault") == "Could not read vault"

    @pytest.mark.unit
    def test_logs_full_details(self, caplog: pytest.LogCaptureFixture) -> None:
        error = OSError("/secret/path")
        with caplog.at_level(logging.ERROR, logger="vaultviews.helpers.logging_helper"):
            sanitize_exception_message(error)
        assert "/secret/path" in caplog.text


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.mark.unit
    def test_accepts_names_and_unknown_levels(self) -> None:
        # basicConfig is a no-op once handlers exist; both calls must simply not fail
        configure_logging("debug")
        configure_logging("not-a-level")
        configure_logging(logging.WARNING)
