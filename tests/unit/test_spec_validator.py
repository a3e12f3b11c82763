"""Unit tests for spec validation and profiles."""

import dataclasses

import pytest
from jsonfmt.core.specs import (
    SKIP_VALIDATION,
    DEFAULT_SPEC_TABLE,
    SpecProfile,
    SpecTable,
    UnknownSpecError,
    build_spec_table,
)
from jsonfmt.validator import (
    SpecValidator,
    ValidationResult,
    ValidationSeverity,
    repair_and_validate,
)


class TestSpecTable:
    """Tests for SpecTable and the built-in profiles."""

    def test_names_in_order_with_skip_last(self):
        assert DEFAULT_SPEC_TABLE.names() == [
            "RFC 8259", "RFC 7159", "RFC 4627", "ECMA-404", SKIP_VALIDATION,
        ]

    def test_names_without_skip(self):
        assert SKIP_VALIDATION not in DEFAULT_SPEC_TABLE.names(include_skip=False)

    def test_builtin_profiles_are_strict(self):
        for profile in DEFAULT_SPEC_TABLE:
            assert profile.allow_comments is False
            assert profile.allow_trailing_commas is False
            assert profile.allow_single_quotes is False
            assert profile.allow_unquoted_keys is False

    def test_rfc_4627_does_not_require_unicode(self):
        assert DEFAULT_SPEC_TABLE.get("RFC 4627").require_unicode is False
        assert DEFAULT_SPEC_TABLE.get("RFC 8259").require_unicode is True

    def test_skip_sentinel_maps_to_none(self):
        assert DEFAULT_SPEC_TABLE.get(SKIP_VALIDATION) is None
        assert DEFAULT_SPEC_TABLE.is_known(SKIP_VALIDATION)

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownSpecError) as exc_info:
            DEFAULT_SPEC_TABLE.get("JSON6")
        assert "JSON6" in str(exc_info.value)
        assert isinstance(exc_info.value, KeyError)

    def test_profiles_are_immutable(self):
        profile = DEFAULT_SPEC_TABLE.get("RFC 8259")
        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.allow_comments = True
        with pytest.raises(TypeError):
            DEFAULT_SPEC_TABLE.profiles["RFC 8259"] = profile

    def test_sentinel_name_is_reserved(self):
        with pytest.raises(ValueError):
            SpecTable([SpecProfile(name=SKIP_VALIDATION)])

    def test_build_with_extra_profile(self):
        table = build_spec_table([SpecProfile(name="JSON5", allow_comments=True)])
        assert "JSON5" in table
        assert len(table) == len(DEFAULT_SPEC_TABLE) + 1


class TestSpecValidator:
    """Tests for SpecValidator."""

    @pytest.fixture
    def validator(self):
        return SpecValidator()

    @pytest.mark.parametrize("text", [
        "{/* c */'a': 1,}",
        "not json at all",
        "",
    ])
    def test_skip_validation_reports_nothing(self, validator, text):
        result = validator.validate(text, SKIP_VALIDATION)
        assert result.errors == []
        assert result.warnings == []
        assert result.spec is None

    def test_block_comment_is_an_error(self, validator):
        result = validator.validate('{/* c */"a":1}', "RFC 8259")
        assert result.errors == ["Comments are not allowed in RFC 8259"]
        assert result.warnings == []
        assert result.valid is False

    def test_trailing_comma_is_an_error(self, validator):
        result = validator.validate('[1,]', "RFC 7159")
        assert result.errors == ["Trailing commas are not allowed in RFC 7159"]

    def test_single_quotes_are_a_warning(self, validator):
        result = validator.validate("{'a': 1}", "ECMA-404")
        assert result.errors == []
        assert result.warnings == ["Single quotes should be double quotes in ECMA-404"]
        assert result.valid is True

    def test_all_checks_apply_independently(self, validator):
        result = validator.validate("{'a': [1,], // c\n}", "RFC 4627")
        assert result.errors == [
            "Comments are not allowed in RFC 4627",
            "Trailing commas are not allowed in RFC 4627",
        ]
        assert result.warnings == ["Single quotes should be double quotes in RFC 4627"]
        assert [i.code for i in result.issues] == [
            "COMMENTS_NOT_ALLOWED", "TRAILING_COMMA", "SINGLE_QUOTES",
        ]
        assert result.issues[2].severity == ValidationSeverity.WARNING

    def test_clean_json_passes(self, validator):
        result = validator.validate('{"a": [1, 2], "b": "x"}', "RFC 8259")
        assert result.issues == []
        assert result.valid is True

    def test_patterns_match_inside_strings(self, validator):
        result = validator.validate('{"note": "see // here"}', "RFC 8259")
        assert result.errors == ["Comments are not allowed in RFC 8259"]

    def test_unknown_spec_raises(self, validator):
        with pytest.raises(UnknownSpecError):
            validator.validate('{}', "RFC 9999")

    def test_lenient_profile_suppresses_checks(self):
        table = build_spec_table([SpecProfile(
            name="JSON5",
            allow_comments=True,
            allow_trailing_commas=True,
            allow_single_quotes=True,
            allow_unquoted_keys=True,
        )])
        result = SpecValidator(table).validate("{'a': [1,], // c\n}", "JSON5")
        assert result.issues == []

    def test_to_dict(self, validator):
        result = validator.validate('[1,]', "RFC 8259")
        data = result.to_dict()
        assert data["valid"] is False
        assert data["errors"] == ["Trailing commas are not allowed in RFC 8259"]
        assert data["issues"][0]["severity"] == "error"


class TestRepairAndValidate:
    """Tests for the repair_and_validate helper."""

    def test_repaired_text_passes_checks(self):
        repair_result, validation = repair_and_validate("{'a': 'b', 'c': [1,],}", "RFC 8259")
        assert repair_result.text == '{"a": "b", "c": [1]}'
        assert isinstance(validation, ValidationResult)
        assert validation.issues == []

    def test_without_fix_validates_raw_text(self):
        repair_result, validation = repair_and_validate("[1,]", "RFC 8259", auto_fix=False)
        assert repair_result is None
        assert validation.errors == ["Trailing commas are not allowed in RFC 8259"]
