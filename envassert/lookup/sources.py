"""Concrete lookup sources for the process environment, mappings and dotenv files.

Every source honours the lookup contract: a total function from key to value
where an unknown key and an empty value both read as `""`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values

from envassert.errors import LookupSourceError

from .interfaces import LookupPort


def lookup_from_environ(key: str) -> str:
    """Return one process environment value, `""` when unset.

    Args:
        key: Environment variable name.

    Returns:
        str: Environment value or empty string.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return os.environ.get(key, "")


def lookup_from_mapping(values: Mapping[str, str | None]) -> LookupPort:
    """Build a lookup reading from an in-memory mapping.

    Args:
        values: Mapping of keys to raw values; None values read as `""`.

    Returns:
        LookupPort: Lookup closure over the mapping.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    def _lookup(key: str) -> str:
        return values.get(key) or ""

    return _lookup


def lookup_from_dotenv(path: str | Path, encoding: str = "utf-8") -> LookupPort:
    """Build a lookup reading a dotenv file once.

    Keys declared without a value read as `""`. Variable interpolation
    follows python-dotenv defaults.

    Args:
        path: Dotenv file path.
        encoding: File encoding.

    Returns:
        LookupPort: Lookup closure over the parsed file.

    Raises:
        LookupSourceError: Raised when the file does not exist or cannot be read.
    """

    dotenv_path = Path(path)
    if not dotenv_path.is_file():
        raise LookupSourceError(f"Dotenv file not found: {dotenv_path}")

    try:
        parsed_values = dotenv_values(dotenv_path=dotenv_path, encoding=encoding)
    except (OSError, UnicodeDecodeError) as error:
        raise LookupSourceError(f"Dotenv file could not be read: {dotenv_path}. Details: {error}") from error

    return lookup_from_mapping(dict(parsed_values))


def lookup_chain(*lookups: LookupPort) -> LookupPort:
    """Combine lookups so that the first non-empty value wins.

    Args:
        lookups: Lookups in priority order.

    Returns:
        LookupPort: Combined lookup returning `""` when every source is empty.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    def _lookup(key: str) -> str:
        for lookup in lookups:
            candidate_value = lookup(key)
            if candidate_value:
                return candidate_value
        return ""

    return _lookup
