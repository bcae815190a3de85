"""Tests for the validation engine and the result model."""

import pytest
from yaml_lint import ValidationEngine, ValidationResult, validate


class TestValidationResult:
    """Tests for ValidationResult invariants."""

    def test_ok(self):
        """Test building a valid result."""
        result = ValidationResult.ok("a.yaml")
        assert result.valid is True
        assert result.line is None
        assert result.message is None

    def test_failed(self):
        """Test building an invalid result."""
        result = ValidationResult.failed("a.yaml", "boom", line=4)
        assert result.valid is False
        assert result.line == 4
        assert result.message == "boom"

    def test_failed_without_line(self):
        """Test that the line is optional for invalid results."""
        assert ValidationResult.failed(None, "boom").line is None

    def test_valid_with_message_rejected(self):
        """Test that a valid result cannot carry a message."""
        with pytest.raises(ValueError, match="cannot carry"):
            ValidationResult(source_id=None, valid=True, message="oops")

    def test_invalid_without_message_rejected(self):
        """Test that an invalid result requires a message."""
        with pytest.raises(ValueError, match="requires a message"):
            ValidationResult(source_id=None, valid=False, line=1)

    def test_line_must_be_one_based(self):
        """Test that line 0 is rejected."""
        with pytest.raises(ValueError, match="1-based"):
            ValidationResult.failed(None, "boom", line=0)

    def test_immutable(self):
        """Test that results cannot be modified."""
        result = ValidationResult.ok(None)
        with pytest.raises(AttributeError):
            result.valid = False  # type: ignore[misc]

    def test_to_dict_omits_absent_fields(self):
        """Test the JSON field convention."""
        assert ValidationResult.ok(None).to_dict() == {"file": None, "valid": True}
        assert ValidationResult.failed("b.yaml", "boom", line=2).to_dict() == {
            "file": "b.yaml",
            "valid": False,
            "line": 2,
            "message": "boom",
        }


class TestValidationEngine:
    """Tests for ValidationEngine.validate."""

    @pytest.fixture
    def engine(self):
        return ValidationEngine()

    def test_valid_document(self, engine):
        """Test that a well-formed document is valid with no diagnostics."""
        result = engine.validate('{"a":1,"e":5}')
        assert result == ValidationResult(source_id=None, valid=True)

    def test_source_id_carried(self, engine):
        """Test that the source identifier is kept on the result."""
        assert engine.validate("a: 1", source_id="conf.yaml").source_id == "conf.yaml"

    def test_syntax_error(self, engine):
        """Test that syntax errors become invalid results."""
        result = engine.validate("a: [1, 2", source_id="bad.yaml")
        assert result.valid is False
        assert result.line == 1
        assert "expected" in result.message

    def test_syntax_error_line(self, engine):
        """Test that the line of the error is reported."""
        result = engine.validate("first: 1\nsecond: 2\nthird: x: y\n")
        assert result.line == 3

    def test_deprecation_is_invalid(self, engine):
        """Test that a deprecation-only document is reported as an error."""
        result = engine.validate("key: 1\nkey: 2\n")
        assert result.valid is False
        assert result.line == 2
        assert "deprecated" in result.message

    def test_custom_tags_flag(self, engine):
        """Test that custom tags depend on the flag."""
        content = "secret: !vault abc123\n"
        assert engine.validate(content).valid is False
        assert engine.validate(content, allow_custom_tags=True).valid is True

    def test_never_raises(self, engine):
        """Test that unreadable content is captured as a result."""
        result = engine.validate("bad: \x00")
        assert result.valid is False
        assert result.line is None

    @pytest.mark.parametrize("content,allow_custom_tags", [
        ("a: !!timestamp foo", False),
        ("a: !!bool maybe", False),
        ("? !env [a]\n: 1\n", True),
        ("a: " + "[" * 5000 + "]" * 5000, False),
    ])
    def test_constructor_failures_captured(self, engine, content, allow_custom_tags):
        """Test that non-YAML exceptions from PyYAML become invalid results."""
        result = engine.validate(content, "x.yaml", allow_custom_tags=allow_custom_tags)
        assert result.valid is False
        assert result.message

    def test_idempotent(self, engine):
        """Test that identical inputs yield identical results."""
        for content in ("a: 1", "a: [1, 2", "a: 1\na: 2\n"):
            assert engine.validate(content, "x.yaml") == engine.validate(content, "x.yaml")

    def test_module_level_validate(self):
        """Test the convenience function."""
        assert validate("a: 1", "x.yaml") == ValidationResult.ok("x.yaml")
        assert validate("a: [1, 2").valid is False

    def test_module_level_validate_keeps_no_engine(self, monkeypatch):
        """Test that each call builds its own engine."""
        import yaml_lint.engine as engine_module

        created = []
        original_init = ValidationEngine.__init__

        def tracking_init(self, adapter=None):
            created.append(self)
            original_init(self, adapter)

        monkeypatch.setattr(ValidationEngine, "__init__", tracking_init)
        validate("a: 1")
        validate("a: 1")
        assert len(created) == 2
        assert created[0] is not created[1]
        assert not any(
            isinstance(value, ValidationEngine) for value in vars(engine_module).values()
        )
