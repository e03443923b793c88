"""Pure parsing and validation functions for every value kind.

Each parser receives one raw string and returns the kind's wrapper value or
raises a typed `EnvValueError`. Plain parsers map `""` to the zero value;
required parsers reject `""` before applying the plain rule.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Final, Sequence
from urllib.parse import urlsplit, urlunsplit

from envassert.domain import (
    DEFAULT_LIST_SEPARATOR,
    URL,
    Enum,
    FieldKind,
    HostPort,
    Integer,
    IntegerList,
    RequiredEnum,
    RequiredHostPort,
    RequiredInteger,
    RequiredIntegerList,
    RequiredText,
    RequiredTextList,
    RequiredURL,
    SchemaField,
    Text,
    TextList,
)
from envassert.errors import (
    ExpectedAtLeastOneValueError,
    InvalidEnumValueError,
    InvalidHostPortError,
    InvalidIntegerError,
    InvalidURLError,
    PartialURLValueError,
    UnexpectedEmptyValueError,
)

_VALUE_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_VALUE_INTEGER_MIN: Final[int] = -(2**63)
_VALUE_INTEGER_MAX: Final[int] = 2**63 - 1
_VALUE_URL_FORBIDDEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"[\x00-\x20\x7f]")
_VALUE_URL_BAD_ESCAPE_PATTERN: Final[re.Pattern[str]] = re.compile(r"%(?![0-9A-Fa-f]{2})")
ENUM_VALUES_SEPARATOR: Final[str] = ","


def value_assert_not_empty(raw: str) -> str:
    """Validate that a raw value is not the empty string.

    Args:
        raw: Raw lookup value.

    Returns:
        str: The unchanged raw value.

    Raises:
        UnexpectedEmptyValueError: Raised when the value is empty.
    """

    if raw == "":
        raise UnexpectedEmptyValueError("Expected value to be non-empty", raw_value=raw)
    return raw


def value_parse_integer(raw: str) -> Integer:
    """Parse an optional base-10 signed integer.

    Args:
        raw: Raw lookup value.

    Returns:
        Integer: Parsed value, `0` for empty input.

    Raises:
        InvalidIntegerError: Raised when the value is not a 64-bit base-10 integer.
    """

    if raw == "":
        return Integer(0)
    if _VALUE_INTEGER_PATTERN.fullmatch(raw) is None:
        raise InvalidIntegerError(f"Expected a base-10 integer, got {raw!r}", raw_value=raw)
    parsed_value = int(raw, 10)
    if parsed_value < _VALUE_INTEGER_MIN or parsed_value > _VALUE_INTEGER_MAX:
        raise InvalidIntegerError(f"Integer value out of range, got {raw!r}", raw_value=raw)
    return Integer(parsed_value)


def value_parse_required_integer(raw: str) -> RequiredInteger:
    """Parse a required base-10 signed integer.

    Raises:
        UnexpectedEmptyValueError: Raised when the value is empty.
        InvalidIntegerError: Raised when the value is not an integer.
    """

    value_assert_not_empty(raw)
    return RequiredInteger(value_parse_integer(raw))


def value_parse_text(raw: str) -> Text:
    """Return an optional text value unchanged."""

    return Text(raw)


def value_parse_required_text(raw: str) -> RequiredText:
    """Return a required text value unchanged.

    Raises:
        UnexpectedEmptyValueError: Raised when the value is empty.
    """

    return RequiredText(value_assert_not_empty(raw))


def value_parse_url(raw: str) -> URL:
    """Parse an optional absolute URL into its canonical form.

    The canonical form lower-cases the scheme and drops empty query and
    fragment delimiters, so parsing a canonical URL returns it unchanged.

    Args:
        raw: Raw lookup value.

    Returns:
        URL: Canonical URL, `""` for empty input.

    Raises:
        InvalidURLError: Raised when the value cannot be parsed as a URL.
        PartialURLValueError: Raised when the URL lacks a scheme or a host.
    """

    if raw == "":
        return URL("")
    if _VALUE_URL_FORBIDDEN_PATTERN.search(raw) is not None:
        raise InvalidURLError(f"Expected a valid URL, got {raw!r}", raw_value=raw)

    try:
        url_parts = urlsplit(raw)
        url_host = url_parts.hostname
        # Accessing `port` validates the port component.
        url_parts.port
    except ValueError as error:
        raise InvalidURLError(f"Expected a valid URL, got {raw!r}", raw_value=raw) from error

    for url_component in (url_parts.netloc, url_parts.path, url_parts.fragment):
        if _VALUE_URL_BAD_ESCAPE_PATTERN.search(url_component) is not None:
            raise InvalidURLError(f"Invalid percent-escape in URL {raw!r}", raw_value=raw)

    if not url_parts.scheme or not url_host:
        raise PartialURLValueError(
            f"Expected a valid URL including a scheme and a host, got {raw!r}",
            raw_value=raw,
        )
    return URL(urlunsplit(url_parts))


def value_parse_required_url(raw: str) -> RequiredURL:
    """Parse a required absolute URL into its canonical form.

    Raises:
        UnexpectedEmptyValueError: Raised when the value is empty.
        InvalidURLError: Raised when the value cannot be parsed as a URL.
        PartialURLValueError: Raised when the URL lacks a scheme or a host.
    """

    value_assert_not_empty(raw)
    return RequiredURL(value_parse_url(raw))


def value_split_enum_values(enum_literal: str | None) -> tuple[str, ...]:
    """Split the `enum` metadata literal into allowed values.

    Args:
        enum_literal: Comma-separated allowed values, or None when undeclared.

    Returns:
        tuple[str, ...]: Allowed values in declaration order.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if enum_literal is None:
        return ()
    return tuple(enum_literal.split(ENUM_VALUES_SEPARATOR))


def value_parse_enum(raw: str, allowed_values: Sequence[str]) -> Enum:
    """Parse an optional member of a declared value set.

    Comparison is exact and case-sensitive.

    Args:
        raw: Raw lookup value.
        allowed_values: Allowed values.

    Returns:
        Enum: Matching value, `""` for empty input.

    Raises:
        InvalidEnumValueError: Raised when the value is not an allowed value.
    """

    if raw == "":
        return Enum("")
    if raw not in allowed_values:
        raise InvalidEnumValueError(
            f"Invalid enum value {raw!r}, expected one of {ENUM_VALUES_SEPARATOR.join(allowed_values)!r}",
            raw_value=raw,
        )
    return Enum(raw)


def value_parse_required_enum(raw: str, allowed_values: Sequence[str]) -> RequiredEnum:
    """Parse a required member of a declared value set.

    Raises:
        UnexpectedEmptyValueError: Raised when the value is empty.
        InvalidEnumValueError: Raised when the value is not an allowed value.
    """

    value_assert_not_empty(raw)
    return RequiredEnum(value_parse_enum(raw, allowed_values))


def _value_split(raw: str, separator: str) -> list[str]:
    return raw.split(separator or DEFAULT_LIST_SEPARATOR)


def value_parse_text_list(raw: str, separator: str = DEFAULT_LIST_SEPARATOR) -> TextList:
    """Split an optional list of text segments.

    Empty segments are kept, so `"a,,b"` yields three segments.

    Args:
        raw: Raw lookup value.
        separator: Segment delimiter; `""` means the default comma.

    Returns:
        TextList: Segments in input order, empty for empty input.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if raw == "":
        return TextList()
    return TextList(_value_split(raw, separator))


def value_parse_required_text_list(raw: str, separator: str = DEFAULT_LIST_SEPARATOR) -> RequiredTextList:
    """Split a required list of text segments.

    Raises:
        UnexpectedEmptyValueError: Raised when the value is empty.
        ExpectedAtLeastOneValueError: Raised when splitting yields no segment.
    """

    value_assert_not_empty(raw)
    segments = value_parse_text_list(raw, separator)
    if not segments:
        raise ExpectedAtLeastOneValueError("Expected at least one list value", raw_value=raw)
    return RequiredTextList(segments)


def value_parse_integer_list(raw: str, separator: str = DEFAULT_LIST_SEPARATOR) -> IntegerList:
    """Split an optional list of integers.

    Every segment must be a non-empty integer, even though the list itself
    is optional.

    Args:
        raw: Raw lookup value.
        separator: Segment delimiter; `""` means the default comma.

    Returns:
        IntegerList: Parsed integers in input order, empty for empty input.

    Raises:
        UnexpectedEmptyValueError: Raised on the first empty segment.
        InvalidIntegerError: Raised on the first non-integer segment.
    """

    if raw == "":
        return IntegerList()

    parsed_values: list[int] = []
    for segment in _value_split(raw, separator):
        parsed_values.append(int(value_parse_required_integer(segment)))
    return IntegerList(parsed_values)


def value_parse_required_integer_list(raw: str, separator: str = DEFAULT_LIST_SEPARATOR) -> RequiredIntegerList:
    """Split a required list of integers.

    Raises:
        UnexpectedEmptyValueError: Raised when the value or a segment is empty.
        InvalidIntegerError: Raised on the first non-integer segment.
        ExpectedAtLeastOneValueError: Raised when splitting yields no segment.
    """

    value_assert_not_empty(raw)
    parsed_values = value_parse_integer_list(raw, separator)
    if not parsed_values:
        raise ExpectedAtLeastOneValueError("Expected at least one list value", raw_value=raw)
    return RequiredIntegerList(parsed_values)


def value_split_host_port(raw: str) -> tuple[str, str]:
    """Split `host:port`, `[ipv6]:port` or `:port` at the last colon.

    Args:
        raw: Non-empty raw lookup value.

    Returns:
        tuple[str, str]: Host without brackets and non-empty port.

    Raises:
        InvalidHostPortError: Raised when the value is not a host:port pair.
    """

    def _invalid(reason: str) -> InvalidHostPortError:
        return InvalidHostPortError(f"Invalid host:port {raw!r}: {reason}", raw_value=raw)

    last_colon_index = raw.rfind(":")
    if last_colon_index < 0:
        raise _invalid("missing port in address")

    if raw.startswith("["):
        closing_bracket_index = raw.find("]")
        if closing_bracket_index < 0:
            raise _invalid("missing ']' in address")
        if closing_bracket_index + 1 == len(raw):
            raise _invalid("missing port in address")
        if closing_bracket_index + 1 != last_colon_index:
            if raw[closing_bracket_index + 1] == ":":
                raise _invalid("too many colons in address")
            raise _invalid("missing port in address")
        host = raw[1:closing_bracket_index]
        host_scan_start, port_scan_start = 1, closing_bracket_index + 1
    else:
        host = raw[:last_colon_index]
        if ":" in host:
            raise _invalid("too many colons in address")
        host_scan_start, port_scan_start = 0, 0

    if "[" in raw[host_scan_start:]:
        raise _invalid("unexpected '[' in address")
    if "]" in raw[port_scan_start:]:
        raise _invalid("unexpected ']' in address")

    port = raw[last_colon_index + 1 :]
    if not port:
        raise _invalid("missing port in address")
    return host, port


def value_parse_host_port(raw: str) -> HostPort:
    """Parse an optional host:port pair.

    Args:
        raw: Raw lookup value.

    Returns:
        HostPort: Parsed pair, both parts `""` for empty input.

    Raises:
        InvalidHostPortError: Raised when the value is not a host:port pair.
    """

    if raw == "":
        return HostPort()
    host, port = value_split_host_port(raw)
    return HostPort(host=host, port=port)


def value_parse_required_host_port(raw: str) -> RequiredHostPort:
    """Parse a required host:port pair.

    Raises:
        UnexpectedEmptyValueError: Raised when the value is empty.
        InvalidHostPortError: Raised when the value is not a host:port pair.
    """

    value_assert_not_empty(raw)
    host, port = value_split_host_port(raw)
    return RequiredHostPort(host=host, port=port)


VALUE_PARSERS: Final[dict[FieldKind, Callable[[str, SchemaField], Any]]] = {
    FieldKind.INTEGER: lambda raw, _field: value_parse_integer(raw),
    FieldKind.REQUIRED_INTEGER: lambda raw, _field: value_parse_required_integer(raw),
    FieldKind.TEXT: lambda raw, _field: value_parse_text(raw),
    FieldKind.REQUIRED_TEXT: lambda raw, _field: value_parse_required_text(raw),
    FieldKind.URL: lambda raw, _field: value_parse_url(raw),
    FieldKind.REQUIRED_URL: lambda raw, _field: value_parse_required_url(raw),
    FieldKind.ENUM: lambda raw, field: value_parse_enum(raw, field.enum_values),
    FieldKind.REQUIRED_ENUM: lambda raw, field: value_parse_required_enum(raw, field.enum_values),
    FieldKind.TEXT_LIST: lambda raw, field: value_parse_text_list(raw, field.separator),
    FieldKind.REQUIRED_TEXT_LIST: lambda raw, field: value_parse_required_text_list(raw, field.separator),
    FieldKind.INTEGER_LIST: lambda raw, field: value_parse_integer_list(raw, field.separator),
    FieldKind.REQUIRED_INTEGER_LIST: lambda raw, field: value_parse_required_integer_list(raw, field.separator),
    FieldKind.HOST_PORT: lambda raw, _field: value_parse_host_port(raw),
    FieldKind.REQUIRED_HOST_PORT: lambda raw, _field: value_parse_required_host_port(raw),
}


def value_parse_field(schema_field: SchemaField, raw: str) -> Any:
    """Parse one raw value with the parser bound to the field's kind.

    Args:
        schema_field: Field description selecting the parser and its metadata.
        raw: Raw value after fallback substitution.

    Returns:
        Any: Wrapper value of the field's kind.

    Raises:
        EnvValueError: Raised by the selected parser on invalid input.
    """

    return VALUE_PARSERS[schema_field.kind](raw, schema_field)
