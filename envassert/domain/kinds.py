"""Value-kind catalog: field kinds, wrapper types, zero values and rendering.

Every supported field annotation is one of the wrapper types defined here.
Each wrapper is bound to exactly one `FieldKind`, and the "Required" variants
differ from their plain counterparts only in rejecting empty raw values.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, ClassVar, Final


class FieldKind(str, enum.Enum):
    """Closed set of field kinds understood by the validation engine."""

    INTEGER = "Integer"
    REQUIRED_INTEGER = "RequiredInteger"
    TEXT = "Text"
    REQUIRED_TEXT = "RequiredText"
    URL = "URL"
    REQUIRED_URL = "RequiredURL"
    ENUM = "Enum"
    REQUIRED_ENUM = "RequiredEnum"
    TEXT_LIST = "TextList"
    REQUIRED_TEXT_LIST = "RequiredTextList"
    INTEGER_LIST = "IntegerList"
    REQUIRED_INTEGER_LIST = "RequiredIntegerList"
    HOST_PORT = "HostPort"
    REQUIRED_HOST_PORT = "RequiredHostPort"

    @property
    def required(self) -> bool:
        """Return whether this kind rejects an empty raw value."""

        return self.value.startswith("Required")

    @property
    def value_type(self) -> type:
        """Return the wrapper type bound to this kind."""

        return _KIND_VALUE_TYPES[self]

    @property
    def is_list(self) -> bool:
        """Return whether this kind splits its raw value on a separator."""

        return self in _LIST_KINDS

    def zero_value(self) -> Any:
        """Return the value stored for an empty raw value of a plain kind.

        Returns:
            Any: Fresh zero value instance of this kind's wrapper type.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return self.value_type()


class Integer(int):
    """Optional integer value, `0` when unset."""

    kind: ClassVar[FieldKind] = FieldKind.INTEGER


class RequiredInteger(int):
    """Required integer value."""

    kind: ClassVar[FieldKind] = FieldKind.REQUIRED_INTEGER


class Text(str):
    """Optional text value, `""` when unset."""

    kind: ClassVar[FieldKind] = FieldKind.TEXT


class RequiredText(str):
    """Required text value."""

    kind: ClassVar[FieldKind] = FieldKind.REQUIRED_TEXT


class URL(str):
    """Optional absolute URL stored in canonical form, `""` when unset."""

    kind: ClassVar[FieldKind] = FieldKind.URL


class RequiredURL(str):
    """Required absolute URL stored in canonical form."""

    kind: ClassVar[FieldKind] = FieldKind.REQUIRED_URL


class Enum(str):
    """Optional member of a declared set of values, `""` when unset."""

    kind: ClassVar[FieldKind] = FieldKind.ENUM


class RequiredEnum(str):
    """Required member of a declared set of values."""

    kind: ClassVar[FieldKind] = FieldKind.REQUIRED_ENUM


class _RenderedList(list):
    """List rendered as comma-joined elements regardless of input separator."""

    def __str__(self) -> str:
        return ",".join(str(item) for item in self)


class TextList(_RenderedList):
    """Optional list of text segments, empty when unset."""

    kind: ClassVar[FieldKind] = FieldKind.TEXT_LIST


class RequiredTextList(_RenderedList):
    """Required list of text segments."""

    kind: ClassVar[FieldKind] = FieldKind.REQUIRED_TEXT_LIST


class IntegerList(_RenderedList):
    """Optional list of integers, empty when unset."""

    kind: ClassVar[FieldKind] = FieldKind.INTEGER_LIST


class RequiredIntegerList(_RenderedList):
    """Required list of integers."""

    kind: ClassVar[FieldKind] = FieldKind.REQUIRED_INTEGER_LIST


@dataclass(frozen=True)
class HostPort:
    """Optional host and port pair, both parts `""` when unset.

    Attributes:
        host: Host name or IP literal without brackets.
        port: Port number or service name.
    """

    kind: ClassVar[FieldKind] = FieldKind.HOST_PORT

    host: str = ""
    port: str = ""

    def __str__(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class RequiredHostPort(HostPort):
    """Required host and port pair."""

    kind: ClassVar[FieldKind] = FieldKind.REQUIRED_HOST_PORT


_KIND_VALUE_TYPES: Final[dict[FieldKind, type]] = {
    FieldKind.INTEGER: Integer,
    FieldKind.REQUIRED_INTEGER: RequiredInteger,
    FieldKind.TEXT: Text,
    FieldKind.REQUIRED_TEXT: RequiredText,
    FieldKind.URL: URL,
    FieldKind.REQUIRED_URL: RequiredURL,
    FieldKind.ENUM: Enum,
    FieldKind.REQUIRED_ENUM: RequiredEnum,
    FieldKind.TEXT_LIST: TextList,
    FieldKind.REQUIRED_TEXT_LIST: RequiredTextList,
    FieldKind.INTEGER_LIST: IntegerList,
    FieldKind.REQUIRED_INTEGER_LIST: RequiredIntegerList,
    FieldKind.HOST_PORT: HostPort,
    FieldKind.REQUIRED_HOST_PORT: RequiredHostPort,
}

_TYPE_KINDS: Final[dict[type, FieldKind]] = {value_type: kind for kind, value_type in _KIND_VALUE_TYPES.items()}

_LIST_KINDS: Final[frozenset[FieldKind]] = frozenset(
    {
        FieldKind.TEXT_LIST,
        FieldKind.REQUIRED_TEXT_LIST,
        FieldKind.INTEGER_LIST,
        FieldKind.REQUIRED_INTEGER_LIST,
    }
)


def kind_for_type(value_type: object) -> FieldKind | None:
    """Resolve the field kind bound to an annotation.

    Lookup is by exact type, so subclasses of the wrapper types are not
    treated as known kinds.

    Args:
        value_type: Resolved field annotation.

    Returns:
        FieldKind | None: Bound kind, or None when the annotation is unsupported.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not isinstance(value_type, type):
        return None
    return _TYPE_KINDS.get(value_type)


def kind_render_value(value: object) -> str:
    """Render one populated field value as a display string.

    Args:
        value: Wrapper value produced by the validation engine.

    Returns:
        str: Display string following the catalog rendering rules.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if value is None:
        return ""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(int(value))
    return str(value)
