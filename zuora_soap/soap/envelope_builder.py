# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Zuora SOAP)
# Description: SOAP envelope builder for the Zuora API.
# ============================================================================
"""SOAP Envelope Builder.

Builds namespaced SOAP envelopes for Zuora API calls.
Single responsibility: XML envelope construction.

Every envelope declares the same four namespaces. The Header is only
present when a header callback is given, and the Body only when a body
callback is given, so the same builder serves the unauthenticated login
request and the authenticated create requests.
"""

from collections.abc import Callable, Mapping
from datetime import date, datetime
from typing import Any

from lxml import etree
from pydantic import BaseModel

from .exceptions import SoapPreconditionError
from .object_registry import ObjectSchema

SOAPENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
API_NS = "http://api.zuora.com/"
OBJECT_NS = "http://object.api.zuora.com/"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"

NAMESPACES = {
    "soapenv": SOAPENV_NS,
    "ns1": API_NS,
    "ns2": OBJECT_NS,
    "xsi": XSI_NS,
}

# Callback that fills a Header or Body element in place
ElementFiller = Callable[[etree._Element], None]


def qname(prefix: str, local_name: str) -> str:
    """Clark-notation tag for a prefixed name, e.g. ("ns1", "login")."""
    return f"{{{NAMESPACES[prefix]}}}{local_name}"


class SoapEnvelopeBuilder:
    """Builds Zuora SOAP envelopes.

    Handles value rendering and the session header for authenticated calls.
    """

    def envelope(
        self,
        header: ElementFiller | None = None,
        body: ElementFiller | None = None,
    ) -> etree._Element:
        """Build an envelope with optional Header and Body.

        Args:
            header: Callback that populates soapenv:Header.
            body: Callback that populates soapenv:Body.

        Returns:
            soapenv:Envelope root element.
        """
        root = etree.Element(qname("soapenv", "Envelope"), nsmap=NAMESPACES)
        if header is not None:
            header(etree.SubElement(root, qname("soapenv", "Header")))
        if body is not None:
            body(etree.SubElement(root, qname("soapenv", "Body")))
        return root

    def login_envelope(self, username: str, password: str) -> etree._Element:
        """Build the unauthenticated login envelope.

        Args:
            username: Zuora API user.
            password: Zuora API password.

        Returns:
            Envelope with ns1:login in the Body and no Header.
        """

        def body(parent: etree._Element) -> None:
            login = etree.SubElement(parent, qname("ns1", "login"))
            self._text_element(login, qname("ns1", "username"), username)
            self._text_element(login, qname("ns1", "password"), password)

        return self.envelope(body=body)

    def authenticated_envelope(
        self,
        session_token: str | None,
        body: ElementFiller,
    ) -> etree._Element:
        """Build an envelope carrying the session header.

        Args:
            session_token: Token obtained from the login call.
            body: Callback that populates soapenv:Body.

        Returns:
            Envelope with ns1:SessionHeader and the given Body.

        Raises:
            SoapPreconditionError: If no session token is set.
        """
        if not session_token:
            raise SoapPreconditionError("Session token not set. Did you call authenticate?")

        def header(parent: etree._Element) -> None:
            session_header = etree.SubElement(parent, qname("ns1", "SessionHeader"))
            self._text_element(session_header, qname("ns1", "session"), session_token)

        return self.envelope(header=header, body=body)

    def create_object_envelope(
        self,
        session_token: str | None,
        schema: ObjectSchema,
        record: Mapping[str, Any] | BaseModel | None,
    ) -> etree._Element:
        """Build the authenticated create envelope for a Zuora object.

        Only whitelisted fields with a value are emitted, in whitelist order,
        as ns2:<Field> children of ns1:zObjects[@xsi:type="ns2:<Type>"].

        Args:
            session_token: Token obtained from the login call.
            schema: Object schema with the field whitelist.
            record: Data for the new object.

        Returns:
            Complete create envelope.
        """

        def body(parent: etree._Element) -> None:
            fields = schema.select(record)
            create = etree.SubElement(parent, qname("ns1", "create"))
            z_objects = etree.SubElement(create, qname("ns1", "zObjects"))
            z_objects.set(qname("xsi", "type"), f"ns2:{schema.type_name}")
            for field_name, value in fields:
                self._text_element(z_objects, qname("ns2", field_name), value)

        return self.authenticated_envelope(session_token, body)

    @staticmethod
    def to_xml(envelope: Any) -> bytes:
        """Serialize an envelope to UTF-8 XML with declaration.

        Raises:
            SoapPreconditionError: If envelope is not an XML element.
        """
        if not etree.iselement(envelope):
            raise SoapPreconditionError(f"Request body must be an XML element, got {type(envelope).__name__}")
        return etree.tostring(envelope, xml_declaration=True, encoding="UTF-8")

    def _text_element(self, parent: etree._Element, tag: str, value: Any) -> etree._Element:
        """Append a child element holding value as text.

        Raises:
            SoapPreconditionError: If the value cannot be represented in XML.
        """
        element = etree.SubElement(parent, tag)
        try:
            element.text = self.render_value(value)
        except (TypeError, ValueError) as e:
            parent.remove(element)
            raise SoapPreconditionError(f"Value for {etree.QName(tag).localname} cannot be serialized to XML: {e}") from e
        return element

    @staticmethod
    def render_value(value: Any) -> str:
        """Render a Python value as element text.

        Args:
            value: Value to render.

        Returns:
            Text content for the element.
        """
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        return str(value)
