"""Tests for explicit schema descriptions built from dataclass records."""

from dataclasses import dataclass, field

import pytest

from envassert.domain import (
    DEFAULT_LIST_SEPARATOR,
    Enum,
    FieldKind,
    HostPort,
    RequiredIntegerList,
    RequiredText,
    TextList,
)
from envassert.errors import (
    ExpectedStructValueError,
    InvalidFieldMetadataError,
    SchemaDefinitionError,
    UnknownFieldTypeError,
    UnsettableFieldError,
    UntaggedFieldError,
)
from envassert.validation import env_field, schema_describe


@dataclass
class _DescribedEnv:
    beep: RequiredText = env_field("BEEP")
    boop: Enum = env_field("BOOP", enum="testing,one,two")
    brrt: RequiredText = env_field("BRRT", default="fallback value")
    bzzt: TextList = env_field("BZZT", separator=":")
    bomf: RequiredIntegerList = env_field("BOMF")
    bind: HostPort = field(default=None, metadata={"env": "BIND", "separator": ""})


def test_validation_schema_describes_fields_in_declaration_order() -> None:
    """Describe every field with its kind and metadata in declaration order.

    Returns:
        None: Assertions validate schema descriptions.

    Raises:
        AssertionError: Raised when descriptions are incorrect.
    """

    schema_fields = schema_describe(_DescribedEnv)

    assert [schema_field.name for schema_field in schema_fields] == ["beep", "boop", "brrt", "bzzt", "bomf", "bind"]
    assert [schema_field.kind for schema_field in schema_fields] == [
        FieldKind.REQUIRED_TEXT,
        FieldKind.ENUM,
        FieldKind.REQUIRED_TEXT,
        FieldKind.TEXT_LIST,
        FieldKind.REQUIRED_INTEGER_LIST,
        FieldKind.HOST_PORT,
    ]
    assert schema_fields[1].enum_values == ("testing", "one", "two")
    assert schema_fields[2].fallback == "fallback value"
    assert schema_fields[0].fallback is None
    assert schema_fields[3].separator == ":"
    assert schema_fields[4].separator == DEFAULT_LIST_SEPARATOR
    assert schema_fields[5].separator == DEFAULT_LIST_SEPARATOR
    assert schema_fields[5].source_key == "BIND"


def test_validation_schema_env_field_starts_unset() -> None:
    """Create record instances with unset fields before validation.

    Returns:
        None: Assertions validate declaration defaults.

    Raises:
        AssertionError: Raised when declaration defaults are incorrect.
    """

    record = _DescribedEnv()

    assert record.beep is None
    assert record.bomf is None


def test_validation_schema_rejects_untagged_field() -> None:
    """Raise `UntaggedFieldError` naming the field without `env` metadata.

    Returns:
        None: Assertions validate untagged-field detection.

    Raises:
        AssertionError: Raised when untagged fields are accepted.
    """

    @dataclass
    class UntaggedEnv:
        beep: RequiredText = env_field("BEEP")
        boop: RequiredText = None

    with pytest.raises(UntaggedFieldError, match="boop") as error_info:
        schema_describe(UntaggedEnv)
    assert error_info.value.field_name == "boop"


def test_validation_schema_rejects_unsettable_fields() -> None:
    """Raise `UnsettableFieldError` for frozen records and private fields.

    Returns:
        None: Assertions validate unsettable-field detection.

    Raises:
        AssertionError: Raised when unsettable fields are accepted.
    """

    @dataclass(frozen=True)
    class FrozenEnv:
        beep: RequiredText = env_field("BEEP")

    @dataclass
    class PrivateEnv:
        _beep: RequiredText = env_field("BEEP")

    with pytest.raises(UnsettableFieldError, match="beep"):
        schema_describe(FrozenEnv)
    with pytest.raises(UnsettableFieldError, match="_beep"):
        schema_describe(PrivateEnv)


def test_validation_schema_rejects_unknown_field_type() -> None:
    """Raise `UnknownFieldTypeError` naming the declared type.

    Returns:
        None: Assertions validate unknown-type detection.

    Raises:
        AssertionError: Raised when unsupported annotations are accepted.
    """

    @dataclass
    class UnknownEnv:
        port: int = env_field("PORT")

    with pytest.raises(UnknownFieldTypeError, match="int") as error_info:
        schema_describe(UnknownEnv)
    assert error_info.value.field_name == "port"


def test_validation_schema_checks_tag_before_settable_before_type() -> None:
    """Report the missing tag first, then settability, then the type.

    Returns:
        None: Assertions validate per-field check order.

    Raises:
        AssertionError: Raised when checks run out of order.
    """

    @dataclass(frozen=True)
    class BrokenEnv:
        port: int = None

    @dataclass(frozen=True)
    class TaggedBrokenEnv:
        port: int = env_field("PORT")

    with pytest.raises(UntaggedFieldError):
        schema_describe(BrokenEnv)
    with pytest.raises(UnsettableFieldError):
        schema_describe(TaggedBrokenEnv)


def test_validation_schema_rejects_non_dataclass_types() -> None:
    """Raise `ExpectedStructValueError` for types that are not dataclasses.

    Returns:
        None: Assertions validate record-type checks.

    Raises:
        AssertionError: Raised when non-dataclass types are accepted.
    """

    class PlainEnv:
        beep: RequiredText = None

    with pytest.raises(ExpectedStructValueError):
        schema_describe(PlainEnv)
    with pytest.raises(ExpectedStructValueError):
        schema_describe(_DescribedEnv())


def test_validation_schema_rejects_non_string_metadata() -> None:
    """Raise `InvalidFieldMetadataError` naming the field with non-string metadata.

    Returns:
        None: Assertions validate metadata type checks.

    Raises:
        AssertionError: Raised when non-string metadata is accepted.
    """

    @dataclass
    class NumericFallbackEnv:
        beep: RequiredText = field(default=None, metadata={"env": "BEEP", "default": 5})

    @dataclass
    class NumericEnumEnv:
        boop: Enum = field(default=None, metadata={"env": "BOOP", "enum": 1})

    with pytest.raises(InvalidFieldMetadataError, match="default") as error_info:
        schema_describe(NumericFallbackEnv)
    assert error_info.value.field_name == "beep"
    assert isinstance(error_info.value, SchemaDefinitionError)

    with pytest.raises(InvalidFieldMetadataError, match="enum"):
        schema_describe(NumericEnumEnv)
