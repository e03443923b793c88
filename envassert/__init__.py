"""Populate and validate dataclass configuration records from environment lookups."""

from .config import ValidatorOptions
from .domain import (
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
from .errors import EnvAssertError, EnvValueError, SchemaDefinitionError
from .lookup import LookupPort, lookup_chain, lookup_from_dotenv, lookup_from_environ, lookup_from_mapping
from .validation import AssertedEnvironment, env_field, envassert_load, schema_describe

__all__ = [
    "AssertedEnvironment",
    "EnvAssertError",
    "EnvValueError",
    "Enum",
    "FieldKind",
    "HostPort",
    "Integer",
    "IntegerList",
    "LookupPort",
    "RequiredEnum",
    "RequiredHostPort",
    "RequiredInteger",
    "RequiredIntegerList",
    "RequiredText",
    "RequiredTextList",
    "RequiredURL",
    "SchemaDefinitionError",
    "SchemaField",
    "Text",
    "TextList",
    "URL",
    "ValidatorOptions",
    "env_field",
    "envassert_load",
    "lookup_chain",
    "lookup_from_dotenv",
    "lookup_from_environ",
    "lookup_from_mapping",
    "schema_describe",
]
