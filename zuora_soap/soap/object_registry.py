# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Zuora SOAP)
# Description: Registry of Zuora object types and their field whitelists.
# ============================================================================
"""Zuora Object Registry.

Extensible registry of the Zuora objects (zObjects) this client can create.
Each registration is a type name plus the ordered whitelist of fields that
are serialized for it. New object types are added without modifying the
client class.

Usage:
    registry = ObjectRegistry()
    registry.register("Refund", ["AccountId", "Amount", "PaymentId", "Type"])
    schema = registry.get("Refund")
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from .exceptions import SoapPreconditionError, UnknownObjectTypeError

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def to_snake_case(name: str) -> str:
    """Convert a Zuora field name to the record key used by callers.

    Args:
        name: CamelCase field or type name (e.g., "BillCycleDay").

    Returns:
        snake_case key (e.g., "bill_cycle_day").
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.replace("-", "_").lower()


@dataclass(frozen=True)
class ObjectSchema:
    """Whitelist of fields for a Zuora object type.

    Attributes:
        type_name: Zuora object name (e.g., "Refund"), emitted as ns2:<type_name>.
        fields: Field names in emission order.
        omit_empty: Fields where zero and empty values are omitted as well.
    """

    type_name: str
    fields: tuple[str, ...]
    omit_empty: frozenset[str] = field(default_factory=frozenset)

    @property
    def method_suffix(self) -> str:
        """snake_case name used for the create_<object> helpers."""
        return to_snake_case(self.type_name)

    def select(self, record: Mapping[str, Any] | BaseModel | None) -> list[tuple[str, Any]]:
        """Filter and order a data record against the whitelist.

        Keys that are not whitelisted are ignored. None and False are
        dropped; zero and "" are sent. Fields listed in omit_empty drop any
        falsy value.

        Args:
            record: Mapping keyed by snake_case field names, or a request model.

        Returns:
            (field, value) pairs in whitelist order.

        Raises:
            SoapPreconditionError: If record is not a mapping or request model.
        """
        if record is None:
            return []
        if isinstance(record, BaseModel):
            record = record.model_dump()
        elif not isinstance(record, Mapping):
            raise SoapPreconditionError(f"Data record must be a mapping or request model, got {type(record).__name__}")

        selected: list[tuple[str, Any]] = []
        for field_name in self.fields:
            value = record.get(to_snake_case(field_name))
            if value is None or value is False:
                continue
            if field_name in self.omit_empty and not value:
                continue
            selected.append((field_name, value))
        return selected


class ObjectRegistry:
    """Registry of Zuora object schemas."""

    def __init__(self) -> None:
        self._objects: dict[str, ObjectSchema] = {}

    def register(
        self,
        type_name: str,
        fields: Iterable[str],
        omit_empty: Iterable[str] = (),
    ) -> "ObjectRegistry":
        """Register an object type.

        Args:
            type_name: Zuora object name (e.g., "BillRun").
            fields: Whitelisted field names in emission order.
            omit_empty: Subset of fields that also drop zero and "" values.

        Returns:
            Self for method chaining.

        Raises:
            ValueError: If omit_empty names a field that is not whitelisted.
        """
        fields = tuple(fields)
        omit_empty = frozenset(omit_empty)
        unknown = omit_empty.difference(fields)
        if unknown:
            raise ValueError(f"omit_empty fields not in whitelist for {type_name}: {sorted(unknown)}")

        self._objects[type_name] = ObjectSchema(type_name=type_name, fields=fields, omit_empty=omit_empty)
        return self

    def get(self, type_name: str) -> ObjectSchema:
        """Get an object schema.

        Raises:
            UnknownObjectTypeError: If the type is not registered.
        """
        if type_name not in self._objects:
            raise UnknownObjectTypeError(type_name)
        return self._objects[type_name]

    def has(self, type_name: str) -> bool:
        """Check if an object type is registered."""
        return type_name in self._objects

    def list_objects(self) -> list[str]:
        """List all registered type names."""
        return list(self._objects.keys())


REFUND_FIELDS = (
    "AccountId",
    "Amount",
    "PaymentId",
    "Type",
)

BILL_RUN_FIELDS = (
    "AccountId",
    "AutoEmail",
    "AutoPost",
    "AutoRenewal",
    "Batch",
    "BillCycleDay",
    "ChargeTypeToExclude",
    "Id",
    "InvoiceDate",
    "NoEmailForZeroAmountInvoice",
    "Status",
    "TargetDate",
)


def create_default_registry() -> ObjectRegistry:
    """Create registry with the default Zuora objects.

    Returns:
        ObjectRegistry with Refund and BillRun registered.
    """
    registry = ObjectRegistry()
    registry.register("Refund", REFUND_FIELDS)
    registry.register("BillRun", BILL_RUN_FIELDS)
    return registry


# Default registry singleton
_default_registry: ObjectRegistry | None = None


def get_default_registry() -> ObjectRegistry:
    """Get the default object registry singleton."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry
