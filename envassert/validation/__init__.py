"""Schema description, value parsing and the population engine."""

from .engine import AssertedEnvironment, engine_validate, envassert_load
from .schema import env_field, schema_describe, schema_describe_field
from .values import (
    VALUE_PARSERS,
    value_assert_not_empty,
    value_parse_enum,
    value_parse_field,
    value_parse_host_port,
    value_parse_integer,
    value_parse_integer_list,
    value_parse_required_enum,
    value_parse_required_host_port,
    value_parse_required_integer,
    value_parse_required_integer_list,
    value_parse_required_text,
    value_parse_required_text_list,
    value_parse_required_url,
    value_parse_text,
    value_parse_text_list,
    value_parse_url,
    value_split_enum_values,
    value_split_host_port,
)

__all__ = [
    "AssertedEnvironment",
    "VALUE_PARSERS",
    "engine_validate",
    "env_field",
    "envassert_load",
    "schema_describe",
    "schema_describe_field",
    "value_assert_not_empty",
    "value_parse_enum",
    "value_parse_field",
    "value_parse_host_port",
    "value_parse_integer",
    "value_parse_integer_list",
    "value_parse_required_enum",
    "value_parse_required_host_port",
    "value_parse_required_integer",
    "value_parse_required_integer_list",
    "value_parse_required_text",
    "value_parse_required_text_list",
    "value_parse_required_url",
    "value_parse_text",
    "value_parse_text_list",
    "value_parse_url",
    "value_split_enum_values",
    "value_split_host_port",
]
