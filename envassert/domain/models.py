"""Typed schema description models shared by the engine and entry points.

A `SchemaField` is the explicit, immutable description of one record field:
its name, its value kind and the metadata that drives lookup and parsing.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .kinds import FieldKind

ENV_METADATA_KEY: Final[str] = "env"
FALLBACK_METADATA_KEY: Final[str] = "default"
ENUM_METADATA_KEY: Final[str] = "enum"
SEPARATOR_METADATA_KEY: Final[str] = "separator"
DEFAULT_LIST_SEPARATOR: Final[str] = ","


class SchemaField(BaseModel):
    """Immutable description of one record field.

    Attributes:
        name: Record attribute name.
        kind: Value kind selected by the field annotation.
        source_key: Lookup key supplying the raw value.
        fallback: Literal substituted when the lookup returns `""`.
        enum_values: Allowed values for enum kinds, in declaration order.
        separator: Delimiter used to split list kinds.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    kind: FieldKind
    source_key: str
    fallback: str | None = None
    enum_values: tuple[str, ...] = ()
    separator: str = DEFAULT_LIST_SEPARATOR

    @field_validator("separator")
    @classmethod
    def _validate_separator(cls, value: str) -> str:
        if not value:
            return DEFAULT_LIST_SEPARATOR
        return value

    def field_resolve_raw(self, looked_up_value: str) -> tuple[str, bool]:
        """Apply the fallback policy to one looked-up raw value.

        Args:
            looked_up_value: Value returned by the lookup function.

        Returns:
            tuple[str, bool]: Raw value to parse and whether the fallback was used.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        if looked_up_value == "" and self.fallback is not None:
            return self.fallback, True
        return looked_up_value, False
