"""
Translator Front Door Tests
===========================

Tests for translate(), translate_stream(), translate_file() and the
TranslatorOptions configuration.
"""

import io

import pytest
import cradle
from cradle.control import (
    TranslationResult,
    TranslatorOptions,
    translate,
    translate_file,
    translate_stream,
)
from cradle.control.errors import (
    ExpectedError,
    InputExhaustedError,
    InvalidNameError,
    TranslationError,
)
from cradle.errors import CradleError


IF_OUTPUT = "\t<condition>\n\tJZ L0\n\tA\n\tL0:\tEND\n"


# =============================================================================
# translate()
# =============================================================================

class TestTranslate:
    """Tests for in-memory translation."""

    def test_translate(self):
        assert translate("iaee") == IF_OUTPUT

    def test_package_exports(self):
        assert cradle.translate("e") == "\tEND\n"
        assert cradle.__version__

    def test_each_call_restarts_labels(self):
        assert translate("iaee") == translate("iaee")

    def test_options(self):
        options = TranslatorOptions(label_prefix="_L", first_label=7)
        assert translate("iaee", options) == "\t<condition>\n\tJZ _L7\n\tA\n\t_L7:\tEND\n"

    def test_partial_output_attached(self):
        with pytest.raises(TranslationError) as exc_info:
            translate("waue")
        assert exc_info.value.partial_output == "\tL0:\t<condition>\n\tJZ L1\n\tA\n"

    def test_errors_are_cradle_errors(self):
        with pytest.raises(CradleError):
            translate("al")

    def test_empty_program(self):
        with pytest.raises(InputExhaustedError) as exc_info:
            translate("")
        assert exc_info.value.partial_output == ""


# =============================================================================
# translate_stream()
# =============================================================================

class TestTranslateStream:
    """Tests for stream-to-sink translation."""

    def test_binary_stream(self):
        sink = io.StringIO()
        result = translate_stream(io.BytesIO(b"iaee"), sink)
        assert sink.getvalue() == IF_OUTPUT
        assert isinstance(result, TranslationResult)
        assert result.success

    def test_result_counts(self):
        result = translate_stream(io.StringIO("ialbee"), io.StringIO())
        assert result.label_count == 2
        # <condition>, JZ, A, JMP, B, END
        assert result.line_count == 6

    def test_filename_in_result(self):
        options = TranslatorOptions(filename="prog.txt")
        result = translate_stream(io.StringIO("e"), io.StringIO(), options)
        assert result.filename == "prog.txt"

    def test_sink_keeps_partial_output(self):
        sink = io.StringIO()
        with pytest.raises(ExpectedError):
            translate_stream(io.StringIO("abl"), sink)
        assert sink.getvalue() == "\tA\n\tB\n"


# =============================================================================
# translate_file()
# =============================================================================

class TestTranslateFile:
    """Tests for file translation."""

    def test_translate_file(self, tmp_path):
        path = tmp_path / "prog.txt"
        path.write_bytes(b"iaee")
        result = translate_file(path)
        assert result.output == IF_OUTPUT
        assert result.filename == str(path)
        assert result.label_count == 1

    def test_trailing_newline_never_read(self, tmp_path):
        """The final e is not consumed, so a trailing newline is harmless."""
        path = tmp_path / "prog.txt"
        path.write_bytes(b"iaee\n")
        assert translate_file(str(path)).output == IF_OUTPUT

    def test_newline_inside_program_is_a_token(self, tmp_path):
        path = tmp_path / "prog.txt"
        path.write_bytes(b"a\nbe")
        with pytest.raises(InvalidNameError) as exc_info:
            translate_file(path)
        assert exc_info.value.found == "\n"
        assert exc_info.value.partial_output == "\tA\n"
        assert str(exc_info.value.location) == f"{path}:1:2"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            translate_file(tmp_path / "missing.txt")


# =============================================================================
# TranslatorOptions
# =============================================================================

class TestTranslatorOptions:
    """Tests for configuration defaults, validation and environment."""

    def test_defaults(self):
        options = TranslatorOptions()
        assert options.filename == "<input>"
        assert options.label_prefix == "L"
        assert options.first_label == 0

    def test_empty_prefix_rejected(self):
        with pytest.raises(ValueError):
            TranslatorOptions(label_prefix="")

    def test_negative_first_label_rejected(self):
        with pytest.raises(ValueError):
            TranslatorOptions(first_label=-1)

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("CRADLE_LABEL_PREFIX", raising=False)
        monkeypatch.delenv("CRADLE_FIRST_LABEL", raising=False)
        assert TranslatorOptions.from_env() == TranslatorOptions()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CRADLE_LABEL_PREFIX", "LBL")
        monkeypatch.setenv("CRADLE_FIRST_LABEL", "3")
        options = TranslatorOptions.from_env()
        assert options.label_prefix == "LBL"
        assert options.first_label == 3

    def test_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv("CRADLE_LABEL_PREFIX", "LBL")
        options = TranslatorOptions.from_env(label_prefix="Q", filename="x")
        assert options.label_prefix == "Q"
        assert options.filename == "x"

    def test_from_env_bad_number(self, monkeypatch):
        monkeypatch.setenv("CRADLE_FIRST_LABEL", "ten")
        with pytest.raises(ValueError, match="CRADLE_FIRST_LABEL"):
            TranslatorOptions.from_env()
