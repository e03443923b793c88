"""Bootstrap wiring for schema import, lookup assembly and logging setup."""

from __future__ import annotations

import importlib
import logging

from envassert.config import RuntimeSettings
from envassert.errors import SchemaImportError
from envassert.lookup import LookupPort, lookup_chain, lookup_from_dotenv, lookup_from_environ


def bootstrap_import_schema(schema_path: str) -> type:
    """Resolve a `module:Class` reference to a record type.

    Args:
        schema_path: Dotted module path and attribute name separated by `:`.

    Returns:
        type: Referenced record type.

    Raises:
        SchemaImportError: Raised when the module or attribute cannot be resolved.
    """

    module_name, separator, attribute_name = schema_path.partition(":")
    if not separator or not module_name or not attribute_name:
        raise SchemaImportError(f"Schema reference must look like `package.module:Class`, got {schema_path!r}")

    try:
        schema_module = importlib.import_module(module_name)
    except ImportError as error:
        raise SchemaImportError(f"Schema module {module_name!r} could not be imported. Details: {error}") from error

    schema_type = schema_module
    for attribute_part in attribute_name.split("."):
        try:
            schema_type = getattr(schema_type, attribute_part)
        except AttributeError as error:
            raise SchemaImportError(f"Schema attribute {attribute_name!r} not found in {module_name!r}") from error

    if not isinstance(schema_type, type):
        raise SchemaImportError(f"Schema reference {schema_path!r} does not name a class")
    return schema_type


def bootstrap_create_lookup(settings: RuntimeSettings, dotenv_path: str | None = None) -> LookupPort:
    """Build the lookup used by command line validation.

    The process environment wins; the dotenv file fills keys it leaves empty.

    Args:
        settings: Validated runtime settings.
        dotenv_path: Optional dotenv path overriding `settings.dotenv_path`.

    Returns:
        LookupPort: Process environment lookup, optionally chained with a dotenv file.

    Raises:
        LookupSourceError: Raised when the dotenv file cannot be read.
    """

    resolved_dotenv_path = dotenv_path or settings.dotenv_path
    if resolved_dotenv_path is None:
        return lookup_from_environ
    return lookup_chain(
        lookup_from_environ,
        lookup_from_dotenv(resolved_dotenv_path, encoding=settings.dotenv_encoding),
    )


def bootstrap_configure_logging(settings: RuntimeSettings) -> None:
    """Configure root logging for command line runs.

    Args:
        settings: Validated runtime settings.

    Returns:
        None: Logging is configured as a side effect.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
