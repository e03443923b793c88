"""Canonical envassert error-code semantics and default messages."""

from __future__ import annotations

from enum import Enum
from typing import Final


class EnvErrorCode(str, Enum):
    """Known failure kinds raised while populating a configuration record."""

    EXPECTED_POINTER_VALUE = "expected_pointer_value"
    UNEXPECTED_NIL_POINTER = "unexpected_nil_pointer"
    EXPECTED_STRUCT_VALUE = "expected_struct_value"
    UNSETTABLE_FIELD = "unsettable_field"
    UNTAGGED_FIELD = "untagged_field"
    UNKNOWN_FIELD_TYPE = "unknown_field_type"
    INVALID_FIELD_METADATA = "invalid_field_metadata"
    UNEXPECTED_EMPTY_VALUE = "unexpected_empty_value"
    INVALID_INTEGER = "invalid_integer"
    INVALID_URL = "invalid_url"
    PARTIAL_URL_VALUE = "partial_url_value"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    EXPECTED_AT_LEAST_ONE_VALUE = "expected_at_least_one_value"
    INVALID_HOST_PORT = "invalid_host_port"
    LOOKUP_SOURCE_UNAVAILABLE = "lookup_source_unavailable"
    SCHEMA_IMPORT_FAILED = "schema_import_failed"


ENV_ERROR_DEFAULT_MESSAGES: Final[dict[str, str]] = {
    EnvErrorCode.EXPECTED_POINTER_VALUE.value: "Expected a record instance, got a class.",
    EnvErrorCode.UNEXPECTED_NIL_POINTER.value: "Expected a record instance, got None.",
    EnvErrorCode.EXPECTED_STRUCT_VALUE.value: "Expected a dataclass instance.",
    EnvErrorCode.UNSETTABLE_FIELD.value: "Field cannot be assigned.",
    EnvErrorCode.UNTAGGED_FIELD.value: "Field does not declare an `env` source key.",
    EnvErrorCode.UNKNOWN_FIELD_TYPE.value: "Field type is not a supported value kind.",
    EnvErrorCode.INVALID_FIELD_METADATA.value: "Field metadata values must be strings.",
    EnvErrorCode.UNEXPECTED_EMPTY_VALUE.value: "Expected value to be non-empty.",
    EnvErrorCode.INVALID_INTEGER.value: "Expected a base-10 integer.",
    EnvErrorCode.INVALID_URL.value: "Expected a valid URL.",
    EnvErrorCode.PARTIAL_URL_VALUE.value: "Expected a valid URL including a scheme and a host.",
    EnvErrorCode.INVALID_ENUM_VALUE.value: "Value is not one of the allowed enum values.",
    EnvErrorCode.EXPECTED_AT_LEAST_ONE_VALUE.value: "Expected at least one list value.",
    EnvErrorCode.INVALID_HOST_PORT.value: "Expected a host:port pair.",
    EnvErrorCode.LOOKUP_SOURCE_UNAVAILABLE.value: "Lookup source could not be read.",
    EnvErrorCode.SCHEMA_IMPORT_FAILED.value: "Schema could not be imported.",
}

SCHEMA_ERROR_CODES: Final[frozenset[str]] = frozenset(
    {
        EnvErrorCode.EXPECTED_POINTER_VALUE.value,
        EnvErrorCode.UNEXPECTED_NIL_POINTER.value,
        EnvErrorCode.EXPECTED_STRUCT_VALUE.value,
        EnvErrorCode.UNSETTABLE_FIELD.value,
        EnvErrorCode.UNTAGGED_FIELD.value,
        EnvErrorCode.UNKNOWN_FIELD_TYPE.value,
        EnvErrorCode.INVALID_FIELD_METADATA.value,
    }
)

VALUE_ERROR_CODES: Final[frozenset[str]] = frozenset(
    {
        EnvErrorCode.UNEXPECTED_EMPTY_VALUE.value,
        EnvErrorCode.INVALID_INTEGER.value,
        EnvErrorCode.INVALID_URL.value,
        EnvErrorCode.PARTIAL_URL_VALUE.value,
        EnvErrorCode.INVALID_ENUM_VALUE.value,
        EnvErrorCode.EXPECTED_AT_LEAST_ONE_VALUE.value,
        EnvErrorCode.INVALID_HOST_PORT.value,
    }
)


def env_error_default_message(error_code: str, fallback_message: str) -> str:
    """Return canonical default message for an error code.

    Args:
        error_code: envassert error code value.
        fallback_message: Fallback message when code is unknown.

    Returns:
        str: Canonical message for known code, else provided fallback message.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return ENV_ERROR_DEFAULT_MESSAGES.get(error_code, fallback_message)
