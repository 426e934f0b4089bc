"""
Data models for the Namecheap SDK.

This module defines the normalized response every API operation returns
and the raw result handed back by the HTTP transport.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class NamecheapResponse:
    """
    Normalized result of one API call.

    Every operation returns one of these, whether the call succeeded, the
    provider reported errors, the transport failed or the client rejected
    the request before sending it.
    """

    data: dict[str, Any]
    success: bool
    errors: list[str]
    warnings: list[str]
    command: str
    execution_time: float  # milliseconds
    raw_xml: str
    meta: dict[str, Any] = field(default_factory=dict)

    def is_success(self) -> bool:
        return self.success

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None

    def server(self) -> Optional[str]:
        return self.meta.get("server")

    def request_id(self) -> Optional[str]:
        return self.meta.get("request_id")

    def to_dict(self) -> dict[str, Any]:
        """Convert the response to plain nested dicts and lists."""
        return {
            "success": self.success,
            "data": self.data,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "meta": {
                **self.meta,
                "command": self.command,
                "execution_time": self.execution_time,
            },
            "raw": self.raw_xml,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize ``to_dict()`` as JSON."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_xml(self) -> str:
        """Get the original response body (empty for client-side errors)."""
        return self.raw_xml


@dataclass
class TransportResult:
    """Outcome of one HTTP exchange."""

    body: str
    http_status: int
    transport_error: Optional[str] = None
    content: Optional[bytes] = None  # undecoded body, parsed in preference to ``body``
