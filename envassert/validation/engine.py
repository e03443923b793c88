"""Population and validation engine for dataclass configuration records.

The engine walks record fields in declaration order, resolves each raw value
through the lookup and its fallback, parses it with the field kind's parser
and commits all parsed values only after every field succeeded.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, TypeVar

from envassert.config import ValidatorOptions
from envassert.errors import (
    EnvAssertError,
    EnvValueError,
    ExpectedPointerValueError,
    ExpectedStructValueError,
    UnexpectedNilPointerError,
)
from envassert.lookup import LookupPort, lookup_from_environ

from .schema import schema_describe_field, schema_resolve_type_hints
from .values import value_parse_field

LOGGER = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def engine_validate(target: Any, lookup: LookupPort) -> None:
    """Populate one record instance in place from a lookup.

    Args:
        target: Dataclass record instance to populate.
        lookup: Function resolving raw values by key.

    Returns:
        None: Target fields are assigned on success.

    Raises:
        UnexpectedNilPointerError: Raised when target is None.
        ExpectedPointerValueError: Raised when target is a class.
        ExpectedStructValueError: Raised when target is not a dataclass instance.
        SchemaDefinitionError: Raised on the first unusable field declaration.
        EnvValueError: Raised on the first field whose raw value is invalid.
    """

    _engine_check_target(target)

    record_type = type(target)
    type_hints = schema_resolve_type_hints(record_type)
    staged_values: dict[str, Any] = {}

    for record_field in dataclasses.fields(record_type):
        schema_field = schema_describe_field(record_type, record_field, type_hints)
        raw_value, fallback_used = schema_field.field_resolve_raw(lookup(schema_field.source_key) or "")
        try:
            staged_values[schema_field.name] = value_parse_field(schema_field, raw_value)
        except EnvValueError as error:
            error.error_attach_field(schema_field.name, schema_field.source_key)
            raise
        LOGGER.debug(
            "Resolved field %s (%s) from %s%s",
            schema_field.name,
            schema_field.kind.value,
            schema_field.source_key,
            " using fallback" if fallback_used else "",
        )

    for field_name, field_value in staged_values.items():
        setattr(target, field_name, field_value)


def _engine_check_target(target: Any) -> None:
    if target is None:
        raise UnexpectedNilPointerError("Expected a record instance, got None")
    if isinstance(target, type):
        raise ExpectedPointerValueError(f"Expected a record instance, got class {target.__name__}")
    if not dataclasses.is_dataclass(target):
        raise ExpectedStructValueError(f"Expected a dataclass instance, got {type(target).__name__}")


class AssertedEnvironment:
    """Record instance bound to the lookup that populates it.

    Example:
        app_env = AppEnv()
        AssertedEnvironment(app_env).validate_or_exit()
    """

    def __init__(self, target: Any, options: ValidatorOptions | None = None):
        """Bind a record instance to validator options.

        Args:
            target: Dataclass record instance to populate.
            options: Validator options; the process environment is used when omitted.
        """

        self._target = target
        self._options = options or ValidatorOptions()

    @classmethod
    def from_environ(cls, target: Any) -> AssertedEnvironment:
        """Bind a record instance to the process environment.

        Args:
            target: Dataclass record instance to populate.

        Returns:
            AssertedEnvironment: Validator reading `os.environ`.

        Raises:
            RuntimeError: This constructor does not raise runtime errors.
        """

        return cls(target, ValidatorOptions(lookup=lookup_from_environ))

    @property
    def target(self) -> Any:
        return self._target

    def validate(self) -> None:
        """Read and validate lookup values into the bound record.

        Returns:
            None: The record is populated on success.

        Raises:
            EnvAssertError: Raised on the first failure; the record is left untouched.
        """

        engine_validate(self._target, self._options.lookup)

    def validate_or_exit(self) -> None:
        """Validate the bound record and abort the process on failure.

        Intended for application start-up only.

        Returns:
            None: The record is populated on success.

        Raises:
            SystemExit: Raised with status 1 when validation fails.
        """

        try:
            self.validate()
        except EnvAssertError as error:
            LOGGER.error("Invalid environment: %s", error)
            raise SystemExit(1) from error


def envassert_load(record_type: Callable[[], RecordT], lookup: LookupPort | None = None) -> RecordT:
    """Instantiate a record type and populate it from a lookup.

    Args:
        record_type: Dataclass record type whose fields all have defaults.
        lookup: Lookup function; the process environment is used when omitted.

    Returns:
        RecordT: Fully populated record instance.

    Raises:
        ExpectedStructValueError: Raised when the type is not a constructible dataclass.
        EnvAssertError: Raised on the first validation failure.
    """

    if not isinstance(record_type, type) or not dataclasses.is_dataclass(record_type):
        raise ExpectedStructValueError(f"Expected a dataclass type, got {record_type!r}")

    try:
        target = record_type()
    except TypeError as error:
        raise ExpectedStructValueError(
            f"Record type {record_type.__name__} must be constructible without arguments"
        ) from error

    options = ValidatorOptions() if lookup is None else ValidatorOptions(lookup=lookup)
    AssertedEnvironment(target, options).validate()
    return target
