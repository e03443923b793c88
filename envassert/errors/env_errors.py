"""Project-native typed exceptions for configuration population failures."""

from __future__ import annotations

from typing import ClassVar

from .env_error_codes import EnvErrorCode, env_error_default_message


class EnvAssertError(Exception):
    """Base exception for every envassert failure.

    Attributes:
        error_code: Failure kind from `EnvErrorCode`.
        field_name: Name of the record field being populated, when known.
        source_key: Lookup key of the field being populated, when known.
        raw_value: Offending raw input for value errors, when known.
    """

    default_error_code: ClassVar[EnvErrorCode | None] = None

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        field_name: str | None = None,
        source_key: str | None = None,
        raw_value: str | None = None,
    ):
        resolved_error_code = error_code
        if resolved_error_code is None and self.default_error_code is not None:
            resolved_error_code = self.default_error_code.value
        resolved_message = message or env_error_default_message(
            resolved_error_code or "", "Configuration validation failed."
        )
        super().__init__(resolved_message)
        self.message = resolved_message
        self.error_code = resolved_error_code
        self.field_name = field_name
        self.source_key = source_key
        self.raw_value = raw_value

    def error_attach_field(self, field_name: str, source_key: str | None) -> None:
        """Record which field and lookup key produced this error.

        Args:
            field_name: Record field name.
            source_key: Lookup key declared by the field.

        Returns:
            None: Error context is updated in place.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        self.field_name = field_name
        self.source_key = source_key

    def __str__(self) -> str:
        context_parts: list[str] = []
        if self.field_name is not None:
            context_parts.append(f"field={self.field_name}")
        if self.source_key is not None:
            context_parts.append(f"env={self.source_key}")
        if not context_parts:
            return self.message
        return f"{', '.join(context_parts)}: {self.message}"


class SchemaDefinitionError(EnvAssertError, TypeError):
    """Record declaration is unusable regardless of lookup contents."""


class ExpectedPointerValueError(SchemaDefinitionError):
    """Validation target is a record class instead of a record instance."""

    default_error_code = EnvErrorCode.EXPECTED_POINTER_VALUE


class UnexpectedNilPointerError(SchemaDefinitionError):
    """Validation target is `None`."""

    default_error_code = EnvErrorCode.UNEXPECTED_NIL_POINTER


class ExpectedStructValueError(SchemaDefinitionError):
    """Validation target is not a dataclass instance."""

    default_error_code = EnvErrorCode.EXPECTED_STRUCT_VALUE


class UnsettableFieldError(SchemaDefinitionError):
    """Record field cannot be assigned (frozen record or private field)."""

    default_error_code = EnvErrorCode.UNSETTABLE_FIELD


class UntaggedFieldError(SchemaDefinitionError):
    """Record field has no `env` metadata."""

    default_error_code = EnvErrorCode.UNTAGGED_FIELD


class UnknownFieldTypeError(SchemaDefinitionError):
    """Record field is annotated with a type that has no value kind."""

    default_error_code = EnvErrorCode.UNKNOWN_FIELD_TYPE


class InvalidFieldMetadataError(SchemaDefinitionError):
    """Record field metadata is not usable (for example a non-string value)."""

    default_error_code = EnvErrorCode.INVALID_FIELD_METADATA


class EnvValueError(EnvAssertError, ValueError):
    """Raw lookup value failed parsing or validation for its field kind."""


class UnexpectedEmptyValueError(EnvValueError):
    """Required value resolved to the empty string."""

    default_error_code = EnvErrorCode.UNEXPECTED_EMPTY_VALUE


class InvalidIntegerError(EnvValueError):
    """Value is not a base-10 integer."""

    default_error_code = EnvErrorCode.INVALID_INTEGER


class InvalidURLError(EnvValueError):
    """Value cannot be parsed as a URL."""

    default_error_code = EnvErrorCode.INVALID_URL


class PartialURLValueError(EnvValueError):
    """Value parses as a URL but lacks a scheme or a host."""

    default_error_code = EnvErrorCode.PARTIAL_URL_VALUE


class InvalidEnumValueError(EnvValueError):
    """Value is not a member of the declared enum values."""

    default_error_code = EnvErrorCode.INVALID_ENUM_VALUE


class ExpectedAtLeastOneValueError(EnvValueError):
    """Required list resolved to zero elements."""

    default_error_code = EnvErrorCode.EXPECTED_AT_LEAST_ONE_VALUE


class InvalidHostPortError(EnvValueError):
    """Value cannot be split into a host and a port."""

    default_error_code = EnvErrorCode.INVALID_HOST_PORT


class LookupSourceError(EnvAssertError, OSError):
    """Lookup source (for example a dotenv file) could not be read."""

    default_error_code = EnvErrorCode.LOOKUP_SOURCE_UNAVAILABLE


class SchemaImportError(EnvAssertError, ImportError):
    """`module:Class` schema reference could not be resolved."""

    default_error_code = EnvErrorCode.SCHEMA_IMPORT_FAILED
