"""Typed interfaces for lookup sources."""

from typing import Protocol


class LookupPort(Protocol):
    """Port definition for resolving one raw value by key."""

    def __call__(self, key: str) -> str:
        """Return the raw value stored under a key.

        Args:
            key: Lookup key declared by a record field.

        Returns:
            str: Raw value, or `""` when the key is unknown.

        Raises:
            RuntimeError: Lookup sources are expected not to raise.
        """
