# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Zuora SOAP)
# Description: Zuora SOAP envelope, parsing and registry module.
# ============================================================================
"""Zuora SOAP Module.

Components:
- SoapEnvelopeBuilder: Builds namespaced SOAP envelopes
- SoapResponseParser: Extracts values from SOAP responses
- ObjectRegistry: Extensible zObject field whitelists

Extension:
    from zuora_soap.soap import get_default_registry

    registry = get_default_registry()
    registry.register("Payment", ["AccountId", "Amount", "EffectiveDate", "Type"])
"""

from .envelope_builder import NAMESPACES, SoapEnvelopeBuilder
from .exceptions import (
    SoapConnectionError,
    SoapErrorResponse,
    SoapPreconditionError,
    UnknownObjectTypeError,
    ZuoraError,
)
from .models import BillRunRequest, RefundRequest, ZuoraSession
from .object_registry import ObjectRegistry, ObjectSchema, create_default_registry, get_default_registry
from .response_parser import SESSION_TOKEN_XPATH, SoapResponseParser

__all__ = [
    "NAMESPACES",
    "SESSION_TOKEN_XPATH",
    "SoapEnvelopeBuilder",
    "SoapResponseParser",
    "ObjectRegistry",
    "ObjectSchema",
    "create_default_registry",
    "get_default_registry",
    "BillRunRequest",
    "RefundRequest",
    "ZuoraSession",
    "ZuoraError",
    "SoapConnectionError",
    "SoapErrorResponse",
    "SoapPreconditionError",
    "UnknownObjectTypeError",
]
