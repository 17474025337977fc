"""
Zuora SOAP Client

Async client for the Zuora billing SOAP API.

Usage:
    from zuora_soap import ZuoraSoapClient

    async with ZuoraSoapClient(username, password, sandbox=True) as client:
        await client.authenticate()
        response = await client.create_bill_run({"target_date": date.today()})
"""

import logging

from zuora_soap.clients import ZuoraSoapClient
from zuora_soap.soap import (
    BillRunRequest,
    ObjectRegistry,
    RefundRequest,
    SoapConnectionError,
    SoapErrorResponse,
    SoapPreconditionError,
    UnknownObjectTypeError,
    ZuoraError,
    ZuoraSession,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ZuoraSoapClient",
    "ObjectRegistry",
    "BillRunRequest",
    "RefundRequest",
    "ZuoraSession",
    "ZuoraError",
    "SoapConnectionError",
    "SoapErrorResponse",
    "SoapPreconditionError",
    "UnknownObjectTypeError",
]
