"""
Custom assertions and verification helpers for tests.

Provides reusable assertion functions for Zuora SOAP envelopes and requests.
"""

import httpx
from lxml import etree

from zuora_soap.soap.envelope_builder import NAMESPACES


def z_object_fields(envelope: etree._Element) -> list[tuple[str, str | None]]:
    """(local name, text) pairs of the zObjects children, in document order."""
    z_objects = envelope.find("soapenv:Body/ns1:create/ns1:zObjects", NAMESPACES)
    assert z_objects is not None, "Envelope has no ns1:create/ns1:zObjects element"
    return [(etree.QName(child).localname, child.text) for child in z_objects]


def assert_z_object_type(envelope: etree._Element, type_name: str) -> None:
    """
    Assert that the zObjects element is typed ns2:<type_name>.

    Args:
        envelope: Create envelope
        type_name: Expected Zuora object name

    Raises:
        AssertionError: If the xsi:type does not match
    """
    z_objects = envelope.find("soapenv:Body/ns1:create/ns1:zObjects", NAMESPACES)
    assert z_objects is not None, "Envelope has no ns1:create/ns1:zObjects element"
    xsi_type = z_objects.get(f"{{{NAMESPACES['xsi']}}}type")
    assert xsi_type == f"ns2:{type_name}", f"Expected xsi:type ns2:{type_name}, got {xsi_type}"


def assert_session_header(envelope: etree._Element, token: str) -> None:
    """Assert that the envelope carries the given session token."""
    session = envelope.findtext("soapenv:Header/ns1:SessionHeader/ns1:session", namespaces=NAMESPACES)
    assert session == token, f"Expected session header {token!r}, got {session!r}"


def assert_soap_post(request: httpx.Request, host: str, path: str = "/apps/services/a/74.0") -> None:
    """
    Assert that a request is a SOAP POST to the given host and path.

    Args:
        request: Recorded request
        host: Expected host
        path: Expected endpoint path

    Raises:
        AssertionError: If method, URL or content type differ
    """
    assert request.method == "POST", f"Expected POST, got {request.method}"
    assert request.url.scheme == "https"
    assert request.url.host == host, f"Expected host {host}, got {request.url.host}"
    assert request.url.path == path, f"Expected path {path}, got {request.url.path}"
    assert request.headers["Content-Type"] == "text/xml"
