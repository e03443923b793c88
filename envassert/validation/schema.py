"""Explicit schema descriptions built from dataclass record declarations."""

from __future__ import annotations

import dataclasses
import inspect
import sys
import typing
from typing import Any, Mapping

from pydantic import ValidationError

from envassert.domain import (
    DEFAULT_LIST_SEPARATOR,
    ENUM_METADATA_KEY,
    ENV_METADATA_KEY,
    FALLBACK_METADATA_KEY,
    SEPARATOR_METADATA_KEY,
    SchemaField,
    kind_for_type,
)
from envassert.errors import (
    ExpectedStructValueError,
    InvalidFieldMetadataError,
    UnknownFieldTypeError,
    UnsettableFieldError,
    UntaggedFieldError,
)

from .values import value_split_enum_values


def env_field(
    env: str,
    *,
    default: str | None = None,
    enum: str | None = None,
    separator: str | None = None,
) -> Any:
    """Declare one record field with its lookup metadata.

    The returned dataclass field starts as None; values are assigned by the
    validation engine.

    Args:
        env: Lookup key supplying the raw value.
        default: Fallback literal used when the lookup returns `""`.
        enum: Comma-separated allowed values for enum kinds.
        separator: Delimiter for list kinds.

    Returns:
        Any: `dataclasses.field` carrying the metadata.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    metadata: dict[str, str] = {ENV_METADATA_KEY: env}
    if default is not None:
        metadata[FALLBACK_METADATA_KEY] = default
    if enum is not None:
        metadata[ENUM_METADATA_KEY] = enum
    if separator is not None:
        metadata[SEPARATOR_METADATA_KEY] = separator
    return dataclasses.field(default=None, metadata=metadata)


def schema_resolve_type_hints(record_type: type) -> dict[str, Any]:
    """Resolve field annotations, tolerating unresolvable forward references.

    Args:
        record_type: Dataclass record type.

    Returns:
        dict[str, Any]: Resolved annotations by field name. When the record
            as a whole cannot be resolved, each annotation is resolved on its
            own and unresolvable ones are kept as strings.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    try:
        return typing.get_type_hints(record_type)
    except (NameError, TypeError, AttributeError, SyntaxError):
        pass

    resolved_hints: dict[str, Any] = {}
    for owner_type in reversed(record_type.__mro__):
        try:
            owner_annotations = inspect.get_annotations(owner_type)
        except NameError:
            continue
        owner_module = sys.modules.get(owner_type.__module__)
        module_namespace = dict(vars(owner_module)) if owner_module is not None else {}
        class_namespace = dict(vars(owner_type))
        for field_name, annotation in owner_annotations.items():
            resolved_hints[field_name] = _schema_resolve_annotation(annotation, module_namespace, class_namespace)
    return resolved_hints


def _schema_resolve_annotation(annotation: Any, module_namespace: dict[str, Any], class_namespace: dict[str, Any]) -> Any:
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, module_namespace, class_namespace)
    except (NameError, TypeError, AttributeError, SyntaxError):
        return annotation


def schema_describe_field(
    record_type: type,
    record_field: dataclasses.Field,
    type_hints: Mapping[str, Any],
) -> SchemaField:
    """Build the description of one dataclass field.

    Checks run in a fixed order: source key present, field settable, kind known.

    Args:
        record_type: Dataclass record type owning the field.
        record_field: Dataclass field to describe.
        type_hints: Resolved annotations of the record type.

    Returns:
        SchemaField: Immutable field description.

    Raises:
        UntaggedFieldError: Raised when the field has no `env` metadata.
        UnsettableFieldError: Raised when the field cannot be assigned.
        UnknownFieldTypeError: Raised when the annotation has no value kind.
        InvalidFieldMetadataError: Raised when a metadata value is not a string.
    """

    field_name = record_field.name
    metadata = record_field.metadata
    if ENV_METADATA_KEY not in metadata:
        raise UntaggedFieldError(f"No `env` metadata set for field {field_name}", field_name=field_name)

    dataclass_params = getattr(record_type, "__dataclass_params__", None)
    if field_name.startswith("_") or (dataclass_params is not None and dataclass_params.frozen):
        raise UnsettableFieldError(f"Field {field_name} cannot be assigned", field_name=field_name)

    annotation = type_hints.get(field_name, record_field.type)
    field_kind = kind_for_type(annotation)
    if field_kind is None:
        annotation_name = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", repr(annotation))
        raise UnknownFieldTypeError(
            f"Unknown field type {annotation_name} for field {field_name}",
            field_name=field_name,
        )

    for metadata_key in (ENV_METADATA_KEY, FALLBACK_METADATA_KEY, ENUM_METADATA_KEY, SEPARATOR_METADATA_KEY):
        metadata_value = metadata.get(metadata_key)
        if metadata_value is not None and not isinstance(metadata_value, str):
            raise InvalidFieldMetadataError(
                f"Metadata `{metadata_key}` of field {field_name} must be a string, got {type(metadata_value).__name__}",
                field_name=field_name,
            )

    try:
        return SchemaField(
            name=field_name,
            kind=field_kind,
            source_key=metadata[ENV_METADATA_KEY] or "",
            fallback=metadata.get(FALLBACK_METADATA_KEY),
            enum_values=value_split_enum_values(metadata.get(ENUM_METADATA_KEY)),
            separator=metadata.get(SEPARATOR_METADATA_KEY) or DEFAULT_LIST_SEPARATOR,
        )
    except ValidationError as error:
        raise InvalidFieldMetadataError(
            f"Metadata of field {field_name} is invalid. Details: {error}",
            field_name=field_name,
        ) from error


def schema_describe(record_type: type) -> tuple[SchemaField, ...]:
    """Describe every field of a dataclass record type in declaration order.

    Args:
        record_type: Dataclass record type.

    Returns:
        tuple[SchemaField, ...]: Field descriptions in declaration order.

    Raises:
        ExpectedStructValueError: Raised when the type is not a dataclass.
        SchemaDefinitionError: Raised on the first unusable field declaration.
    """

    if not isinstance(record_type, type) or not dataclasses.is_dataclass(record_type):
        raise ExpectedStructValueError(f"Expected a dataclass type, got {record_type!r}")

    type_hints = schema_resolve_type_hints(record_type)
    return tuple(
        schema_describe_field(record_type, record_field, type_hints)
        for record_field in dataclasses.fields(record_type)
    )
