import pydantic
import pytest

from baubit_validation import (
    PACKAGE_NAME,
    BaubitError,
    BaubitValidationError,
    ValidationError,
    ValidationResult,
)


class TestValidationResult:
    """Test the ValidationResult model."""

    def test_ok_is_valid(self) -> None:
        result = ValidationResult.ok()
        assert result.is_valid
        assert result.errors == []
        assert bool(result) is True

    def test_fail_carries_error(self) -> None:
        result = ValidationResult.fail("bad", value=3, code="odd", validator="even")
        assert not result.is_valid
        assert bool(result) is False
        assert result.messages == ["bad"]
        assert result.codes == ["odd"]
        error = result.errors[0]
        assert error.field == "value"
        assert error.value == 3
        assert error.validator == "even"

    def test_add_error_flips_to_failed(self) -> None:
        result = ValidationResult(is_valid=True)
        result.add_error("name", "must not be empty", "")
        assert not result.is_valid
        assert str(result.errors[0]) == "name: must not be empty"

    def test_failed_without_errors_rejected(self) -> None:
        """A failed result must explain itself."""
        with pytest.raises(pydantic.ValidationError):
            ValidationResult(is_valid=False)

    def test_valid_with_errors_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ValidationResult(
                is_valid=True,
                errors=[ValidationError(field="value", message="x")],
            )

    def test_merge(self) -> None:
        result = ValidationResult.ok()
        result.merge(ValidationResult.ok())
        assert result.is_valid

        result.merge(ValidationResult.fail("first"))
        result.merge(ValidationResult.fail("second"))
        assert not result.is_valid
        assert result.messages == ["first", "second"]

    def test_to_dict(self) -> None:
        result = ValidationResult.fail("bad", field="age", code="too_small", validator="range")
        assert result.to_dict() == {
            "is_valid": False,
            "errors": [
                {"field": "age", "message": "bad", "code": "too_small", "validator": "range"}
            ],
        }

    def test_raise_for_errors_passthrough(self) -> None:
        result = ValidationResult.ok()
        assert result.raise_for_errors() is result

    def test_raise_for_errors_raises(self) -> None:
        result = ValidationResult.fail("one")
        result.add_error("other", "two")

        with pytest.raises(BaubitValidationError) as exc_info:
            result.raise_for_errors()

        error = exc_info.value
        assert error.result is result
        assert str(error) == "one; two"
        assert len(error.errors()) == 2
        assert error.context["package"] == PACKAGE_NAME


class TestErrors:
    """Test package error classes."""

    def test_invalid_type_is_value_error(self) -> None:
        error = BaubitError.invalid_type("non_empty", "str", 5)
        assert isinstance(error, ValueError)
        assert error.type == "invalid_type"
        assert error.context["package"] == PACKAGE_NAME
        assert str(error) == "non_empty expects str, got int"

    def test_invalid_config_message(self) -> None:
        error = BaubitError.invalid_config("length", "max_length is smaller than min_length")
        assert error.type == "invalid_config"
        assert "length: max_length is smaller than min_length" in str(error)

    def test_from_pydantic_error_adds_package(self) -> None:
        original = pydantic_core_error()
        wrapped = BaubitError.from_pydantic_error(original)
        assert wrapped.type == "custom"
        assert wrapped.context["package"] == PACKAGE_NAME
        assert wrapped.context["limit"] == 3

    def test_wraps_pydantic_validation_error(self) -> None:
        with pytest.raises(pydantic.ValidationError) as exc_info:
            ValidationResult(is_valid=False)

        wrapped = BaubitValidationError.from_validation_error(exc_info.value, {"source": "test"})
        assert wrapped.original_error is exc_info.value
        assert wrapped.result is None
        assert wrapped.context == {"package": PACKAGE_NAME, "source": "test"}
        assert "at least one error" in str(wrapped)


def pydantic_core_error():
    from pydantic_core import PydanticCustomError

    return PydanticCustomError("custom", "over {limit}", {"limit": 3})
