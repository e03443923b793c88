"""Error taxonomy package for configuration population failures."""

from .env_error_codes import (
    ENV_ERROR_DEFAULT_MESSAGES,
    SCHEMA_ERROR_CODES,
    VALUE_ERROR_CODES,
    EnvErrorCode,
    env_error_default_message,
)
from .env_errors import (
    EnvAssertError,
    EnvValueError,
    ExpectedAtLeastOneValueError,
    ExpectedPointerValueError,
    ExpectedStructValueError,
    InvalidEnumValueError,
    InvalidFieldMetadataError,
    InvalidHostPortError,
    InvalidIntegerError,
    InvalidURLError,
    LookupSourceError,
    PartialURLValueError,
    SchemaDefinitionError,
    SchemaImportError,
    UnexpectedEmptyValueError,
    UnexpectedNilPointerError,
    UnknownFieldTypeError,
    UnsettableFieldError,
    UntaggedFieldError,
)

__all__ = [
    "ENV_ERROR_DEFAULT_MESSAGES",
    "EnvAssertError",
    "EnvErrorCode",
    "EnvValueError",
    "ExpectedAtLeastOneValueError",
    "ExpectedPointerValueError",
    "ExpectedStructValueError",
    "InvalidEnumValueError",
    "InvalidFieldMetadataError",
    "InvalidHostPortError",
    "InvalidIntegerError",
    "InvalidURLError",
    "LookupSourceError",
    "PartialURLValueError",
    "SCHEMA_ERROR_CODES",
    "SchemaDefinitionError",
    "SchemaImportError",
    "UnexpectedEmptyValueError",
    "UnexpectedNilPointerError",
    "UnknownFieldTypeError",
    "UnsettableFieldError",
    "UntaggedFieldError",
    "VALUE_ERROR_CODES",
    "env_error_default_message",
]
