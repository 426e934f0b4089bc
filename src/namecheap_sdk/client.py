"""
Namecheap API client.

Adds the global parameters (credentials and command name) to each call,
sends it through the transport and normalizes whatever comes back. Every
failure is returned as an error-carrying NamecheapResponse.
"""

import time
from typing import Any, Mapping, Optional, Union

from .audit_logger import AuditLogger
from .config import PRODUCTION_ENDPOINT, SANDBOX_ENDPOINT, ClientConfig
from .enums import ClientErrorCode, HttpMethod, LogLevel
from .models import NamecheapResponse
from .response_parser import NamecheapResponseParser
from .transport import HttpTransport, Transport


AUTHENTICATION_REQUIRED_MESSAGE = "Authentication information must be provided."
NO_PERMISSION_MESSAGE = "No Permission to perform this request"

# Passed as ``user_name`` to keep the configured UserName
USE_CONFIGURED = object()


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ApiClient:
    """
    Synchronous Namecheap API client.

    Usage:
        client = ApiClient("apiuser", "apikey", "username", "203.0.113.7")
        client.enable_sandbox()
        response = client.get("namecheap.domains.check", {"DomainList": "example.com"})
        if response.is_success():
            print(response.data)
    """

    COMPONENT = "api_client"

    def __init__(
        self,
        api_user: Optional[str] = None,
        api_key: Optional[str] = None,
        user_name: Optional[str] = None,
        client_ip: Optional[str] = None,
        endpoint: str = PRODUCTION_ENDPOINT,
        transport: Optional[Transport] = None,
        logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_user: API user name
            api_key: API key
            user_name: Account the calls act on (usually the API user)
            client_ip: Whitelisted IPv4 address of the caller
            endpoint: API endpoint URL
            transport: Transport to use (an HttpTransport is created on demand)
            logger: Optional audit logger for request logging
        """
        self.api_user = api_user
        self.api_key = api_key
        self.user_name = user_name
        self.client_ip = client_ip
        self._endpoint = endpoint
        self._transport = transport
        self._owns_transport = transport is None
        self._logger = logger

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[Transport] = None,
        logger: Optional[AuditLogger] = None,
    ) -> "ApiClient":
        """Create a client from a ClientConfig."""
        owns_transport = transport is None
        if transport is None:
            transport = HttpTransport(
                timeout=config.transport.timeout_seconds,
                verify=config.transport.verify_tls,
                user_agent=config.transport.user_agent,
            )
        client = cls(
            api_user=config.credentials.api_user,
            api_key=config.credentials.api_key,
            user_name=config.credentials.user_name,
            client_ip=config.credentials.client_ip,
            endpoint=config.resolved_endpoint(),
            transport=transport,
            logger=logger,
        )
        client._owns_transport = owns_transport
        return client

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @endpoint.setter
    def endpoint(self, value: str) -> None:
        self._endpoint = value

    @property
    def is_sandbox(self) -> bool:
        return self._endpoint == SANDBOX_ENDPOINT

    def enable_sandbox(self) -> "ApiClient":
        """Switch to the sandbox endpoint."""
        self._endpoint = SANDBOX_ENDPOINT
        return self

    def disable_sandbox(self) -> "ApiClient":
        """Switch to the production endpoint."""
        self._endpoint = PRODUCTION_ENDPOINT
        return self

    def get(
        self,
        command: str,
        data: Optional[Mapping[str, Any]] = None,
        user_name: Any = USE_CONFIGURED,
    ) -> NamecheapResponse:
        """Send a command as a GET request."""
        return self.request(command, data, HttpMethod.GET, user_name)

    def post(
        self,
        command: str,
        data: Optional[Mapping[str, Any]] = None,
        user_name: Any = USE_CONFIGURED,
    ) -> NamecheapResponse:
        """Send a command as a POST request."""
        return self.request(command, data, HttpMethod.POST, user_name)

    def request(
        self,
        command: str,
        data: Optional[Mapping[str, Any]] = None,
        method: Union[HttpMethod, str] = HttpMethod.GET,
        user_name: Any = USE_CONFIGURED,
    ) -> NamecheapResponse:
        """
        Send a command and normalize the reply.

        Args:
            command: Dotted API command, e.g. 'namecheap.domains.getList'
            data: Command parameters; None values are dropped
            method: GET or POST
            user_name: UserName for this call only; None omits the parameter

        Returns:
            NamecheapResponse (never raises)
        """
        start_time = time.perf_counter()

        if not self.api_user or not self.api_key or not self.client_ip:
            self._log(LogLevel.WARN, "Missing API credentials", {"command": command})
            return NamecheapResponseParser.from_transport_failure(
                AUTHENTICATION_REQUIRED_MESSAGE,
                command,
                self._elapsed_ms(start_time),
                ClientErrorCode.AUTHENTICATION_REQUIRED,
            )

        try:
            http_method = method if isinstance(method, HttpMethod) else HttpMethod(str(method).upper())
        except ValueError:
            return NamecheapResponseParser.from_transport_failure(
                f"Invalid request method: {str(method).upper()}",
                command,
                self._elapsed_ms(start_time),
            )

        params = self.build_params(command, data, user_name)
        self._log(LogLevel.DEBUG, "Sending request", {
            "command": command,
            "method": http_method.value,
            "endpoint": self._endpoint,
            "params": params,
        })

        result = self._get_transport().send(http_method, self._endpoint, params)
        execution_time = self._elapsed_ms(start_time)

        if result.http_status in (401, 403):
            self._log_failure(command, NO_PERMISSION_MESSAGE, result.http_status)
            return NamecheapResponseParser.from_transport_failure(
                NO_PERMISSION_MESSAGE,
                command,
                execution_time,
                result.http_status,
            )

        if result.transport_error:
            self._log_failure(command, result.transport_error, result.http_status)
            return NamecheapResponseParser.from_transport_failure(
                result.transport_error,
                command,
                execution_time,
            )

        response = NamecheapResponseParser.from_xml(
            result.body,
            command,
            execution_time,
            meta={
                "http_code": result.http_status,
                "endpoint": self._endpoint,
                "request_method": http_method.value,
            },
            content=result.content,
        )

        self._log(
            LogLevel.INFO if response.success else LogLevel.WARN,
            f"{command} completed",
            {
                "success": response.success,
                "errors": response.errors,
                "warnings": response.warnings,
                "execution_time_ms": round(response.execution_time, 3),
            },
        )
        return response

    def build_params(
        self,
        command: str,
        data: Optional[Mapping[str, Any]] = None,
        user_name: Any = USE_CONFIGURED,
    ) -> dict[str, str]:
        """
        Merge global parameters over the command data.

        Returns:
            Flat string map without None values
        """
        params: dict[str, Any] = dict(data or {})
        params.update({
            "ApiUser": self.api_user,
            "ApiKey": self.api_key,
            "UserName": self.user_name if user_name is USE_CONFIGURED else user_name,
            "ClientIp": self.client_ip,
            "Command": command,
        })
        return {key: _stringify(value) for key, value in params.items() if value is not None}

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and self._transport is not None:
            close = getattr(self._transport, "close", None)
            if close is not None:
                close()
            self._transport = None

    def _get_transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpTransport()
            self._owns_transport = True
        return self._transport

    def _elapsed_ms(self, start_time: float) -> float:
        """Calculate elapsed time in milliseconds."""
        return (time.perf_counter() - start_time) * 1000

    def _log(self, level: LogLevel, message: str, data: Optional[dict] = None) -> None:
        if self._logger is not None:
            self._logger.log(level, self.COMPONENT, message, data)

    def _log_failure(self, command: str, message: str, status_code: int) -> None:
        if self._logger is not None:
            self._logger.log_error(
                self.COMPONENT,
                f"{command} failed: {message}",
                request_url=self._endpoint,
                response_status_code=status_code or None,
            )
