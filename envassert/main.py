"""Command line entrypoint for checking and describing configuration schemas."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from envassert.bootstrap import bootstrap_configure_logging, bootstrap_create_lookup, bootstrap_import_schema
from envassert.config import SettingsLoadError, config_load_settings
from envassert.domain import SchemaField, kind_render_value
from envassert.errors import EnvAssertError
from envassert.validation import envassert_load, schema_describe

_MAIN_HIDDEN_VALUE = "***"


def main(argv: Sequence[str] | None = None) -> None:
    """Run the selected command against a `module:Class` schema.

    Args:
        argv: Command line arguments; `sys.argv[1:]` when omitted.

    Returns:
        None: Results are printed to stdout.

    Raises:
        SystemExit: Raised with status 1 when settings, schema or environment are invalid.
    """

    argument_parser = argparse.ArgumentParser(
        prog="envassert",
        description="Validate configuration records against the environment",
    )
    argument_parser.add_argument(
        "command",
        choices=("check", "describe"),
        help="`check` populates the schema from the environment, `describe` prints the schema fields",
        type=str,
    )
    argument_parser.add_argument(
        "schema",
        help="Schema reference in `package.module:Class` form",
        type=str,
    )
    argument_parser.add_argument(
        "--dotenv",
        dest="dotenv_path",
        type=str,
        help="Optional dotenv file consulted for keys the process environment leaves empty",
    )
    argument_parser.add_argument(
        "--show-values",
        dest="show_values",
        action="store_true",
        help="Print resolved values instead of masking them for `check`",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        print(f"INVALID_SETTINGS: {error}", file=sys.stderr)
        raise SystemExit(1) from error
    bootstrap_configure_logging(settings)

    try:
        schema_type = bootstrap_import_schema(parsed_arguments.schema)
        schema_fields = schema_describe(schema_type)
        if parsed_arguments.command == "describe":
            for schema_field in schema_fields:
                print(main_format_schema_field(schema_field))
            return

        lookup = bootstrap_create_lookup(settings, dotenv_path=parsed_arguments.dotenv_path)
        record = envassert_load(schema_type, lookup=lookup)
    except EnvAssertError as error:
        print(f"INVALID_ENVIRONMENT: {error}", file=sys.stderr)
        raise SystemExit(1) from error

    for schema_field in schema_fields:
        rendered_value = kind_render_value(getattr(record, schema_field.name))
        if not parsed_arguments.show_values and rendered_value:
            rendered_value = _MAIN_HIDDEN_VALUE
        print(f"{schema_field.name} ({schema_field.source_key}) = {rendered_value}")


def main_format_schema_field(schema_field: SchemaField) -> str:
    """Format one schema field description as a single line.

    Args:
        schema_field: Field description.

    Returns:
        str: Space-separated description line.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    line_parts = [schema_field.name, schema_field.kind.value, f"env={schema_field.source_key}"]
    if schema_field.fallback is not None:
        line_parts.append(f"default={schema_field.fallback!r}")
    if schema_field.enum_values:
        line_parts.append(f"enum={','.join(schema_field.enum_values)}")
    if schema_field.kind.is_list:
        line_parts.append(f"separator={schema_field.separator!r}")
    return " ".join(line_parts)


if __name__ == "__main__":
    main()
