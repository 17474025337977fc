"""
Shared pytest fixtures for all tests.

This module provides an httpx mock transport that records outgoing SOAP
requests and preconfigured Zuora clients.
"""

import pytest

from zuora_soap.clients.soap_client import ZuoraSoapClient
from zuora_soap.soap.object_registry import create_default_registry
from tests.utils.factories import RecordingTransport, create_soap_handler


# ============================================================================
# HTTP TRANSPORT FIXTURES
# ============================================================================


@pytest.fixture
def transport() -> RecordingTransport:
    """Recording transport answering login and create requests with 200."""
    return RecordingTransport(create_soap_handler())


# ============================================================================
# CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def client(transport) -> ZuoraSoapClient:
    """Sandbox client wired to the recording transport."""
    return ZuoraSoapClient(
        "api-user@example.com",
        "s3cret",
        sandbox=True,
        registry=create_default_registry(),
        transport=transport,
    )


@pytest.fixture
def authenticated_client(client) -> ZuoraSoapClient:
    """Client with a session token already set."""
    client.session_token = "session-token-123"
    return client
