"""Tests for the interactive input session."""

from byte_format.config import INVALID_INPUT_MESSAGE
from byte_format.session import FormatResult, InteractiveSession, format_value


class TestFormatValue:
    """Tests for format_value function."""

    def test_valid_value(self):
        """Should carry the formatted size."""
        result = format_value("1536")
        assert result == FormatResult(value="1536", formatted="1.50 KB")
        assert result.ok

    def test_invalid_value(self):
        """Should capture the error message instead of raising."""
        result = format_value("abc")
        assert not result.ok
        assert result.formatted is None
        assert result.error == INVALID_INPUT_MESSAGE


class TestInteractiveSession:
    """Tests for InteractiveSession."""

    def test_default_value(self):
        """Should start from 520."""
        session = InteractiveSession()
        assert session.value == "520"
        assert session.current_result().formatted == "520.00 B"

    def test_default_value_from_env(self, monkeypatch):
        """Should honor BYTE_FORMAT_DEFAULT_VALUE."""
        monkeypatch.setenv('BYTE_FORMAT_DEFAULT_VALUE', "2048")
        session = InteractiveSession()
        assert session.current_result().formatted == "2.00 KB"

    def test_accepted_edit_rerenders(self):
        """Should format the new text after an accepted edit."""
        session = InteractiveSession("520")
        assert session.apply_edit("1024") is True
        assert session.value == "1024"
        assert session.current_result().formatted == "1.00 KB"

    def test_rejected_edit_keeps_value(self):
        """Should discard edits with non-digit characters."""
        session = InteractiveSession("520")
        assert session.apply_edit("52a") is False
        assert session.value == "520"
        assert session.rejected_edits == 1
        assert session.current_result().formatted == "520.00 B"

    def test_cleared_field(self):
        """Should show zero bytes for an empty field."""
        session = InteractiveSession("520")
        session.apply_edit("")
        assert session.current_result().formatted == "0 B"

    def test_invalid_env_default_falls_back(self, monkeypatch):
        """Should ignore a non-digit BYTE_FORMAT_DEFAULT_VALUE."""
        monkeypatch.setenv('BYTE_FORMAT_DEFAULT_VALUE', "abc")
        session = InteractiveSession()
        assert session.value == "520"
        assert session.current_result().formatted == "520.00 B"
