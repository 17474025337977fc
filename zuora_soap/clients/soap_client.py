"""
Zuora SOAP API Client

Async client for the Zuora billing SOAP API. Logs in once with username and
password, keeps the returned session token, and sends it in the
SessionHeader of every create request.

Connection Details:
    - Sandbox URL: https://apisandbox.zuora.com
    - Production URL: https://api.zuora.com
    - Endpoint: POST /apps/services/a/{version} (Content-Type: text/xml)

Lifecycle:
    Unauthenticated -> Authenticated on a successful authenticate().
    There is no token refresh; callers re-authenticate after a failure.

Concurrency:
    authenticate() is serialized with an asyncio.Lock. Otherwise an instance
    is meant to be driven by a single task and is not thread-safe.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import httpx
from lxml import etree
from pydantic import BaseModel

from zuora_soap.config.settings import ZuoraSettings, get_settings
from zuora_soap.core.logger import get_client_logger
from zuora_soap.soap.envelope_builder import SoapEnvelopeBuilder
from zuora_soap.soap.exceptions import SoapConnectionError, SoapErrorResponse, SoapPreconditionError
from zuora_soap.soap.models import BillRunRequest, RefundRequest, ZuoraSession
from zuora_soap.soap.object_registry import ObjectRegistry, get_default_registry
from zuora_soap.soap.response_parser import SoapResponseParser

DataRecord = Mapping[str, Any] | BaseModel | None


class ZuoraSoapClient:
    """
    Async SOAP client for Zuora.

    Builds envelopes with SoapEnvelopeBuilder, reads login responses with
    SoapResponseParser and looks up object whitelists in ObjectRegistry.
    Create calls return the raw httpx.Response; interpreting the create
    result is left to the caller.

    Example:
        async with ZuoraSoapClient("user", "secret", sandbox=True) as client:
            await client.authenticate()
            response = await client.create_refund(
                {"account_id": "A1", "amount": 10, "payment_id": "P1", "type": "Electronic"}
            )
    """

    SANDBOX_URL = "https://apisandbox.zuora.com"
    PRODUCTION_URL = "https://api.zuora.com"
    DEFAULT_API_VERSION = "74.0"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        username: str | None,
        password: str | None,
        sandbox: bool = True,
        *,
        api_version: str = DEFAULT_API_VERSION,
        verify_ssl: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        sandbox_url: str | None = None,
        production_url: str | None = None,
        registry: ObjectRegistry | None = None,
        builder: SoapEnvelopeBuilder | None = None,
        parser: SoapResponseParser | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client. No request is made until authenticate().

        Args:
            username: Zuora API user
            password: Zuora API password
            sandbox: Target the sandbox tenant (default) or production
            api_version: SOAP API version used in the endpoint path
            verify_ssl: Verify TLS certificates (off by default)
            timeout: Request timeout in seconds
            sandbox_url: Override for the sandbox base URL
            production_url: Override for the production base URL
            registry: Object registry (defaults to Refund and BillRun)
            builder: Optional custom envelope builder
            parser: Optional custom response parser
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.username = username
        self.password = password
        self.sandbox = sandbox
        self.api_version = api_version
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self._sandbox_url = (sandbox_url or self.SANDBOX_URL).rstrip("/")
        self._production_url = (production_url or self.PRODUCTION_URL).rstrip("/")

        self._registry = registry or get_default_registry()
        self._builder = builder or SoapEnvelopeBuilder()
        self._parser = parser or SoapResponseParser()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._session: ZuoraSession | None = None
        self._auth_lock = asyncio.Lock()
        self._logger = get_client_logger(username, sandbox)

    @classmethod
    def from_settings(cls, settings: ZuoraSettings | None = None, **kwargs: Any) -> ZuoraSoapClient:
        """
        Build a client from ZUORA_* settings.

        Args:
            settings: Settings instance (defaults to get_settings())
            **kwargs: Constructor arguments; these override the settings values
        """
        settings = settings or get_settings()
        options: dict[str, Any] = {
            "username": settings.ZUORA_USERNAME,
            "password": settings.ZUORA_PASSWORD,
            "sandbox": settings.ZUORA_SANDBOX,
            "api_version": settings.ZUORA_API_VERSION,
            "verify_ssl": settings.ZUORA_VERIFY_SSL,
            "timeout": settings.ZUORA_TIMEOUT,
            "sandbox_url": settings.ZUORA_SANDBOX_URL,
            "production_url": settings.ZUORA_PRODUCTION_URL,
        }
        return cls(**{**options, **kwargs})

    async def __aenter__(self) -> ZuoraSoapClient:
        """Enter async context and create HTTP client."""
        await self._ensure_client()
        return self

    async def __aexit__(self, *args) -> None:
        """Exit async context and close HTTP client."""
        await self.close()

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    # =========================================================================
    # Session state
    # =========================================================================

    @property
    def api_url(self) -> str:
        """Base URL selected by the sandbox flag."""
        return self._sandbox_url if self.sandbox else self._production_url

    @property
    def api_path(self) -> str:
        """SOAP endpoint path."""
        return f"/apps/services/a/{self.api_version}"

    @property
    def registry(self) -> ObjectRegistry:
        return self._registry

    @property
    def session(self) -> ZuoraSession | None:
        """Session from the last successful authenticate(), if any."""
        return self._session

    @property
    def session_token(self) -> str | None:
        return self._session.token if self._session else None

    @session_token.setter
    def session_token(self, token: str | None) -> None:
        # Reuse a token obtained elsewhere, or clear it with None
        self._session = ZuoraSession(token=token, sandbox=self.sandbox) if token is not None else None

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None and self._session.is_valid

    # =========================================================================
    # Authentication
    # =========================================================================

    async def authenticate(self) -> httpx.Response:
        """
        Log in and store the session token for later requests.

        Returns:
            Raw login response

        Raises:
            SoapPreconditionError: Username or password missing
            SoapErrorResponse: Login answered with a non-200 status
            SoapConnectionError: Any failure while sending the login request
        """
        if not self.username or not self.password:
            raise SoapPreconditionError("Username and password are required to authenticate")

        async with self._auth_lock:
            envelope = self._builder.login_envelope(self.username, self.password)
            try:
                response = await self._post(envelope)
            except Exception as e:
                self._logger.error(f"Zuora login request failed: {e}", error_type=type(e).__name__)
                raise SoapConnectionError(f"Could not connect to Zuora: {e}") from e

            return self._handle_auth_response(response)

    def _handle_auth_response(self, response: httpx.Response) -> httpx.Response:
        """
        Store the session token from a login response.

        Raises:
            SoapErrorResponse: On a non-200 status
        """
        if response.status_code != 200:
            fault = self._parser.extract_fault(response.content)
            self._logger.warning(
                "Zuora rejected login credentials",
                status_code=response.status_code,
                fault=fault,
            )
            raise SoapErrorResponse(status_code=response.status_code)

        token = self._parser.extract_session_token(response.content)
        self._session = ZuoraSession(token=token, sandbox=self.sandbox)
        if token:
            self._logger.info("Zuora session established")
        else:
            self._logger.warning("Zuora login response did not contain a session token")
        return response

    # =========================================================================
    # Object creation
    # =========================================================================

    def create_object_xml(self, type_name: str, data: DataRecord = None) -> etree._Element:
        """
        Build the authenticated create envelope for a registered object.

        Args:
            type_name: Registered object name (e.g., "Refund")
            data: Record keyed by snake_case field names, or a request model

        Returns:
            Envelope element (serialize with SoapEnvelopeBuilder.to_xml)

        Raises:
            UnknownObjectTypeError: Type not registered
            SoapPreconditionError: No session token, or a value not representable in XML
        """
        schema = self._registry.get(type_name)
        return self._builder.create_object_envelope(self.session_token, schema, data)

    async def create_object(self, type_name: str, data: DataRecord = None) -> httpx.Response:
        """
        Send a create request for a registered object.

        The envelope is built before any I/O, so a missing session token
        fails without touching the network.

        Returns:
            Raw create response, whatever its status
        """
        envelope = self.create_object_xml(type_name, data)
        try:
            response = await self._post(envelope)
        except httpx.RequestError as e:
            self._logger.error(f"Zuora create {type_name} request failed: {e}", object_type=type_name)
            raise SoapConnectionError(f"Could not connect to Zuora: {e}") from e

        self._logger.info(
            f"Zuora create {type_name} answered {response.status_code}",
            object_type=type_name,
            status_code=response.status_code,
        )
        return response

    def create_refund_xml(self, data: Mapping[str, Any] | RefundRequest | None = None) -> etree._Element:
        """Build the create envelope for a Refund."""
        return self.create_object_xml("Refund", data)

    async def create_refund(self, data: Mapping[str, Any] | RefundRequest | None = None) -> httpx.Response:
        """Create a Refund."""
        return await self.create_object("Refund", data)

    def create_bill_run_xml(self, data: Mapping[str, Any] | BillRunRequest | None = None) -> etree._Element:
        """Build the create envelope for a BillRun."""
        return self.create_object_xml("BillRun", data)

    async def create_bill_run(self, data: Mapping[str, Any] | BillRunRequest | None = None) -> httpx.Response:
        """Create a BillRun."""
        return await self.create_object("BillRun", data)

    # =========================================================================
    # Transport
    # =========================================================================

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.api_url,
                verify=self.verify_ssl,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def _post(self, envelope: Any) -> httpx.Response:
        """
        POST an envelope to the SOAP endpoint.

        Raises:
            SoapPreconditionError: If envelope is not an XML element
        """
        content = self._builder.to_xml(envelope)
        client = await self._ensure_client()
        return await client.post(
            self.api_path,
            content=content,
            headers={"Content-Type": "text/xml"},
        )
