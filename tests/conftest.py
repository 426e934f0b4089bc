"""
Shared fixtures: a recording transport standing in for the network.
"""

from dataclasses import dataclass, field
from typing import Optional

import pytest

from namecheap_sdk.client import ApiClient
from namecheap_sdk.enums import HttpMethod
from namecheap_sdk.models import TransportResult


OK_RESPONSE = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<ApiResponse Status="OK" xmlns="http://api.namecheap.com/xml.response">'
    "<Errors /><Warnings />"
    "<RequestedCommand>namecheap.test</RequestedCommand>"
    '<CommandResponse Type="namecheap.test"><Result>done</Result></CommandResponse>'
    "<Server>TEST01</Server>"
    "<GMTTimeDifference>--5:00</GMTTimeDifference>"
    "<ExecutionTime>0.01</ExecutionTime>"
    "</ApiResponse>"
)


@dataclass
class SentRequest:
    method: HttpMethod
    url: str
    params: dict


@dataclass
class RecordingTransport:
    """Transport returning a canned result and remembering every request."""

    body: str = OK_RESPONSE
    http_status: int = 200
    transport_error: Optional[str] = None
    requests: list = field(default_factory=list)
    closed: bool = False

    def send(self, method, url, params) -> TransportResult:
        self.requests.append(SentRequest(method=method, url=url, params=dict(params)))
        return TransportResult(
            body=self.body,
            http_status=self.http_status,
            transport_error=self.transport_error,
        )

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> SentRequest:
        return self.requests[-1]


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def api_client(transport: RecordingTransport) -> ApiClient:
    return ApiClient(
        api_user="apiuser",
        api_key="secret-key",
        user_name="username",
        client_ip="203.0.113.7",
        transport=transport,
    )
