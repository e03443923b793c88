"""Domain models for value kinds and schema descriptions."""

from .kinds import (
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
    Text,
    TextList,
    kind_for_type,
    kind_render_value,
)
from .models import (
    DEFAULT_LIST_SEPARATOR,
    ENUM_METADATA_KEY,
    ENV_METADATA_KEY,
    FALLBACK_METADATA_KEY,
    SEPARATOR_METADATA_KEY,
    SchemaField,
)

__all__ = [
    "DEFAULT_LIST_SEPARATOR",
    "ENUM_METADATA_KEY",
    "ENV_METADATA_KEY",
    "Enum",
    "FALLBACK_METADATA_KEY",
    "FieldKind",
    "HostPort",
    "Integer",
    "IntegerList",
    "RequiredEnum",
    "RequiredHostPort",
    "RequiredInteger",
    "RequiredIntegerList",
    "RequiredText",
    "RequiredTextList",
    "RequiredURL",
    "SEPARATOR_METADATA_KEY",
    "SchemaField",
    "Text",
    "TextList",
    "URL",
    "kind_for_type",
    "kind_render_value",
]
