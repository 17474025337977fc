# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Zuora SOAP)
# Description: SOAP response parser for the Zuora API.
# ============================================================================
"""SOAP Response Parser.

Extracts values from Zuora SOAP responses with fixed XPath expressions.
Single responsibility: XML response parsing.

Create responses are not interpreted here; callers receive them raw.
"""

import logging

from lxml import etree

from .envelope_builder import NAMESPACES

logger = logging.getLogger(__name__)

SESSION_TOKEN_XPATH = "/".join(
    [
        "//soapenv:Envelope",
        "soapenv:Body",
        "ns1:loginResponse",
        "ns1:result",
        "ns1:Session",
    ]
)

FAULT_STRING_XPATH = "//soapenv:Envelope/soapenv:Body/soapenv:Fault/faultstring"


class SoapResponseParser:
    """Parses Zuora SOAP XML responses."""

    def __init__(self, namespaces: dict[str, str] | None = None) -> None:
        """Initialize parser.

        Args:
            namespaces: Prefix map used by the XPath expressions.
        """
        self.namespaces = namespaces or NAMESPACES

    def extract_session_token(self, xml_text: str | bytes) -> str:
        """Extract the session token from a login response.

        A response without the session element, or one that is not XML at
        all, yields an empty token.

        Args:
            xml_text: Raw login response body.

        Returns:
            Session token text, or "" when absent.
        """
        return self.xpath_text(xml_text, SESSION_TOKEN_XPATH)

    def extract_fault(self, xml_text: str | bytes) -> str | None:
        """Extract the SOAP fault message if present.

        Args:
            xml_text: Raw response body.

        Returns:
            faultstring text or None.
        """
        return self.xpath_text(xml_text, FAULT_STRING_XPATH) or None

    def xpath_text(self, xml_text: str | bytes, path: str) -> str:
        """Concatenated text of all nodes matching a namespaced XPath.

        Args:
            xml_text: Raw XML document.
            path: XPath expression using the parser's prefixes.

        Returns:
            Matched text, or "" when nothing matches or the document is invalid.
        """
        root = self._parse(xml_text)
        if root is None:
            return ""
        return "".join(node.text or "" for node in root.xpath(path, namespaces=self.namespaces))

    @staticmethod
    def _parse(xml_text: str | bytes) -> etree._Element | None:
        """Parse a response body, returning None if it is not XML."""
        if not xml_text:
            return None
        if isinstance(xml_text, str):
            xml_text = xml_text.encode("utf-8")
        try:
            return etree.fromstring(xml_text, parser=etree.XMLParser(resolve_entities=False, no_network=True))
        except etree.XMLSyntaxError as e:
            logger.warning(f"Error parsing SOAP XML: {e}")
            return None
