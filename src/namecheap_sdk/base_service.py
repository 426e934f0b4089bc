"""
Base class for the per-command-group services.
"""

from typing import Iterable

from .client import ApiClient
from .enums import ClientErrorCode
from .models import NamecheapResponse
from .response_parser import NamecheapResponseParser
from .validation import required_fields_message


class ApiService:
    """
    Service bound to one API command group.

    Subclasses set COMMAND_PREFIX (e.g. 'namecheap.domains.') and build
    parameter maps for the client.
    """

    COMMAND_PREFIX = "namecheap."

    def __init__(self, api_client: ApiClient) -> None:
        self._client = api_client

    @property
    def client(self) -> ApiClient:
        return self._client

    def command(self, name: str) -> str:
        """Full dotted command name for a method of this group."""
        return self.COMMAND_PREFIX + name

    def _missing_fields_response(self, missing: Iterable[str], name: str) -> NamecheapResponse:
        return NamecheapResponseParser.from_transport_failure(
            required_fields_message(missing),
            self.command(name),
            0.0,
            ClientErrorCode.MISSING_REQUIRED_FIELDS,
        )
