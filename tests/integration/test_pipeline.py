"""Integration tests for the format pipeline."""

import json

import pytest
from jsonfmt.core.specs import UnknownSpecError
from jsonfmt.formatter import (
    FormatPipeline,
    FormatRequest,
    FormatSuccess,
    FormatFailure,
    NESTING_ERROR,
    NO_DATA_ERROR,
    format_text,
    trim_input,
)
from jsonfmt.validator.repairer import (
    FIX_TRAILING_COMMAS,
    FIX_SINGLE_QUOTES,
    FIX_UNQUOTED_KEYS,
    FIX_LITERALS,
)


class TestFormatPipeline:
    """End-to-end pipeline tests."""

    @pytest.fixture
    def pipeline(self):
        return FormatPipeline()

    def run(self, pipeline, text, spec="RFC 8259", style="2 Space Tab", repair=False):
        return pipeline.run(FormatRequest(
            text=text,
            spec_name=spec,
            indent_style=style,
            repair=repair,
        ))

    def test_repairs_single_quotes_and_trailing_comma(self, pipeline):
        result = self.run(pipeline, "{'a': 'b',}", repair=True)
        assert isinstance(result, FormatSuccess)
        assert json.loads(result.formatted) == {"a": "b"}
        assert FIX_SINGLE_QUOTES in result.fixes
        assert FIX_TRAILING_COMMAS in result.fixes
        assert result.errors == []
        assert result.valid is True
        assert result.spec == "RFC 8259"

    def test_unparseable_without_repair_fails(self, pipeline):
        result = self.run(pipeline, "not json")
        assert isinstance(result, FormatFailure)
        assert result.success is False
        assert result.error
        assert result.fixes == []
        assert result.warnings == []

    def test_key_order_preserved_compact(self, pipeline):
        result = self.run(pipeline, '{"b":2,"a":1}', style="Compact")
        assert result.formatted == '{"b":2,"a":1}'

    def test_two_space_pretty_print(self, pipeline):
        result = self.run(pipeline, '{"b":2,"a":1}', style="2 Space Tab")
        assert result.formatted == '{\n  "b": 2,\n  "a": 1\n}'

    def test_unknown_style_falls_back_to_three_spaces(self, pipeline):
        result = self.run(pipeline, '{"a":1}', style="weird")
        assert isinstance(result, FormatSuccess)
        assert result.formatted == '{\n   "a": 1\n}'

    def test_end_to_end_repair(self, pipeline):
        result = self.run(
            pipeline,
            "{ name: 'Bob', active: True, }",
            spec="RFC 4627",
            repair=True,
        )
        assert isinstance(result, FormatSuccess)
        assert result.fixes == [
            FIX_TRAILING_COMMAS,
            FIX_SINGLE_QUOTES,
            FIX_UNQUOTED_KEYS,
            FIX_LITERALS,
        ]
        assert result.errors == []
        assert result.warnings == []
        assert result.formatted == '{\n  "name": "Bob",\n  "active": true\n}'

    def test_parse_failure_drops_spec_errors_but_keeps_warnings(self, pipeline):
        result = self.run(pipeline, "{'a': 1} // c")
        assert isinstance(result, FormatFailure)
        assert result.warnings == ["Single quotes should be double quotes in RFC 8259"]
        assert "errors" not in result.to_dict()

    def test_parse_failure_keeps_fixes(self, pipeline):
        result = self.run(pipeline, "{a: 1", repair=True)
        assert isinstance(result, FormatFailure)
        assert result.fixes == [FIX_UNQUOTED_KEYS]

    def test_spec_errors_on_parseable_text_mark_invalid(self, pipeline):
        result = self.run(pipeline, '{"note": "see // here"}', style="Compact")
        assert isinstance(result, FormatSuccess)
        assert result.errors == ["Comments are not allowed in RFC 8259"]
        assert result.valid is False
        assert result.formatted == '{"note":"see // here"}'

    def test_warnings_do_not_affect_validity(self, pipeline):
        result = self.run(pipeline, '{"s": "it\'s \'quoted\'"}')
        assert isinstance(result, FormatSuccess)
        assert len(result.warnings) == 1
        assert result.valid is True

    def test_skip_validation_has_no_spec(self, pipeline):
        result = self.run(pipeline, '{"note": "see // here"}', spec="Skip Validation")
        assert isinstance(result, FormatSuccess)
        assert result.spec is None
        assert result.errors == []
        assert result.valid is True

    def test_repair_not_applied_when_disabled(self, pipeline):
        result = self.run(pipeline, "{a: 1}")
        assert isinstance(result, FormatFailure)
        assert result.fixes == []

    @pytest.mark.parametrize("text", ["", "   \n\t ", "\ufeff", " \ufeff\n"])
    def test_empty_input_fails_fast(self, pipeline, text):
        result = self.run(pipeline, text)
        assert isinstance(result, FormatFailure)
        assert result.error == NO_DATA_ERROR

    def test_surrounding_whitespace_trimmed(self, pipeline):
        result = self.run(pipeline, '   {"a":1}  \n', style="Compact")
        assert result.formatted == '{"a":1}'

    def test_leading_byte_order_mark_ignored(self, pipeline):
        result = self.run(pipeline, '\ufeff{"a":1}\n', style="Compact")
        assert isinstance(result, FormatSuccess)
        assert result.formatted == '{"a":1}'

    def test_line_comment_ends_at_carriage_return(self, pipeline):
        result = self.run(pipeline, '{"a": 1, // c\r"b": 2}', style="Compact", repair=True)
        assert isinstance(result, FormatSuccess)
        assert result.formatted == '{"a":1,"b":2}'

    def test_small_floats_render_like_javascript(self, pipeline):
        result = self.run(pipeline, "[0.00001, 1e-7, 5e-324]", style="Compact")
        assert result.formatted == "[0.00001,1e-7,5e-324]"

    def test_deep_nesting_is_a_parse_failure(self, pipeline):
        depth = 100_000
        result = self.run(pipeline, "[" * depth + "]" * depth)
        assert isinstance(result, FormatFailure)
        assert result.error == NESTING_ERROR

    def test_unknown_spec_raises(self, pipeline):
        with pytest.raises(UnknownSpecError):
            self.run(pipeline, '{"a":1}', spec="JSON Lines")

    def test_nan_is_a_parse_failure(self, pipeline):
        result = self.run(pipeline, '{"a": NaN}')
        assert isinstance(result, FormatFailure)

    def test_success_to_dict(self, pipeline):
        result = self.run(pipeline, '[1,2]', style="Compact", spec="Skip Validation")
        assert result.to_dict() == {
            "success": True,
            "formatted": "[1,2]",
            "fixes": [],
            "errors": [],
            "warnings": [],
            "valid": True,
            "spec": None,
        }

    def test_failure_to_dict(self, pipeline):
        data = self.run(pipeline, "{").to_dict()
        assert data["success"] is False
        assert set(data) == {"success", "error", "fixes", "warnings"}


class TestFormatText:
    """Tests for the format_text convenience function."""

    def test_defaults(self):
        result = format_text('{"a":[1,2]}')
        assert result.formatted == '{\n   "a": [\n      1,\n      2\n   ]\n}'
        assert result.spec == "RFC 8259"

    def test_with_repair(self):
        result = format_text("{a: NULL}", indent_style="Compact", repair=True)
        assert result.formatted == '{"a":null}'


class TestTrimInput:
    """Tests for trim_input."""

    @pytest.mark.parametrize("text,expected", [
        ('  {"a": 1}\n', '{"a": 1}'),
        ('\ufeff{"a": 1}', '{"a": 1}'),
        ('\n\ufeff  [1]  \ufeff', "[1]"),
        ('"\ufeff"', '"\ufeff"'),
        (None, ""),
    ])
    def test_strips_whitespace_and_byte_order_mark(self, text, expected):
        assert trim_input(text) == expected
