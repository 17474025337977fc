"""Test utilities and helpers."""

from tests.utils.builders import BillRunBuilder, RefundBuilder
from tests.utils.factories import (
    LOGIN_FAULT_RESPONSE,
    RecordingTransport,
    create_create_response,
    create_login_response,
    create_soap_handler,
    is_login_request,
)
from tests.utils.assertions import (
    assert_session_header,
    assert_soap_post,
    assert_z_object_type,
    z_object_fields,
)

__all__ = [
    # Builders
    "RefundBuilder",
    "BillRunBuilder",
    # Factories
    "LOGIN_FAULT_RESPONSE",
    "RecordingTransport",
    "create_login_response",
    "create_create_response",
    "create_soap_handler",
    "is_login_request",
    # Assertions
    "assert_session_header",
    "assert_soap_post",
    "assert_z_object_type",
    "z_object_fields",
]
