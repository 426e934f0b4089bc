"""
Response normalization for Namecheap API replies.

Turns a raw XML reply (or a failure detected before one arrived) into a
NamecheapResponse. Nothing here raises: malformed documents become error
responses like any other failure.

Provider reply shape:

    <ApiResponse Status="OK" xmlns="http://api.namecheap.com/xml.response">
      <Errors />
      <Warnings />
      <RequestedCommand>namecheap.domains.check</RequestedCommand>
      <CommandResponse Type="namecheap.domains.check">...</CommandResponse>
      <Server>PHX01APIEXT03</Server>
      <GMTTimeDifference>--5:00</GMTTimeDifference>
      <ExecutionTime>0.012</ExecutionTime>
    </ApiResponse>
"""

import time
from typing import Any, Optional

from .enums import ClientErrorCode
from .exceptions import XmlParseError
from .models import NamecheapResponse
from .xml_tree import ATTRIBUTE_PREFIX, TEXT_KEY, as_list, xml_to_tree


PARSE_ERROR_MESSAGE = "Failed to parse XML response from Namecheap API"
UNKNOWN_ERROR_TEXT = "Unknown error"


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000


class NamecheapResponseParser:
    """Builds NamecheapResponse objects from XML replies and failures."""

    @classmethod
    def from_xml(
        cls,
        xml_response: str,
        command: str,
        execution_time: float,
        meta: Optional[dict[str, Any]] = None,
        content: Optional[bytes] = None,
    ) -> NamecheapResponse:
        """
        Normalize a raw XML reply.

        Args:
            xml_response: Response body as received
            command: Dotted API command that was executed
            execution_time: Transport round-trip time in milliseconds
            meta: Transport metadata (http_code, endpoint, request_method)
            content: Undecoded body; parsed instead of ``xml_response`` so the
                encoding declared by the document applies

        Returns:
            NamecheapResponse; on malformed XML an error response without
            the raw body
        """
        start_time = time.perf_counter()

        try:
            tree = xml_to_tree(content if content is not None else xml_response)
        except XmlParseError:
            return cls.from_transport_failure(
                PARSE_ERROR_MESSAGE,
                command,
                execution_time,
            )

        api_response = next(iter(tree.values()))
        if not isinstance(api_response, dict):
            api_response = {}

        status = api_response.get(ATTRIBUTE_PREFIX + "Status", "ERROR")
        errors = cls._extract_errors(api_response)
        warnings = cls._extract_warnings(api_response)
        data = cls._extract_data(api_response)

        response_meta = {
            **(meta or {}),
            "status": status,
            "xmlns": api_response.get(ATTRIBUTE_PREFIX + "xmlns"),
            "server": api_response.get(ATTRIBUTE_PREFIX + "Server"),
            "gmt_time_difference": api_response.get(ATTRIBUTE_PREFIX + "GMTTimeDifference"),
        }

        return NamecheapResponse(
            data=data,
            success=status.upper() == "OK" and not errors,
            errors=errors,
            warnings=warnings,
            command=command,
            execution_time=execution_time + _elapsed_ms(start_time),
            raw_xml=xml_response,
            meta={k: v for k, v in response_meta.items() if v is not None},
        )

    @staticmethod
    def from_transport_failure(
        message: str,
        command: str,
        execution_time: float,
        error_code: int = ClientErrorCode.NONE,
    ) -> NamecheapResponse:
        """
        Build an error response for a failure that produced no usable reply.

        Args:
            message: Error message
            command: Dotted API command that was attempted
            execution_time: Time spent so far in milliseconds
            error_code: Numeric code; 0 formats the message without a code

        Returns:
            NamecheapResponse with a single error and no data
        """
        error = f"[{int(error_code)}] {message}" if error_code else message
        return NamecheapResponse(
            data={},
            success=False,
            errors=[error],
            warnings=[],
            command=command,
            execution_time=execution_time,
            raw_xml="",
            meta={"error_type": "client_error"},
        )

    @staticmethod
    def format_error(error: dict[str, Any]) -> str:
        """Format an error entry as ``[number] text`` or bare text."""
        number = error.get(ATTRIBUTE_PREFIX + "Number", "")
        text = error.get(TEXT_KEY, UNKNOWN_ERROR_TEXT)
        return f"[{number}] {text}" if number else text

    @classmethod
    def _extract_errors(cls, api_response: dict[str, Any]) -> list[str]:
        section = api_response.get("Errors")
        if not isinstance(section, dict):
            return []

        errors = []
        for entry in as_list(section.get("Error")):
            if isinstance(entry, dict):
                errors.append(cls.format_error(entry))
            elif isinstance(entry, str):
                # No attributes at all, so no code either
                errors.append(entry)
        return errors

    @staticmethod
    def _extract_warnings(api_response: dict[str, Any]) -> list[str]:
        section = api_response.get("Warnings")
        if not isinstance(section, dict):
            return []

        warnings = []
        for entry in as_list(section.get("Warning")):
            if isinstance(entry, dict) and TEXT_KEY in entry:
                warnings.append(entry[TEXT_KEY])
            elif isinstance(entry, str):
                warnings.append(entry)
        return warnings

    @staticmethod
    def _extract_data(api_response: dict[str, Any]) -> dict[str, Any]:
        data = {}

        command_response = api_response.get("CommandResponse")
        if isinstance(command_response, dict):
            for key, value in command_response.items():
                if not key.startswith(ATTRIBUTE_PREFIX):
                    data[key] = value

        if "RequestedCommand" in api_response:
            data["_requestedCommand"] = api_response["RequestedCommand"]
        if "Server" in api_response:
            data["_server"] = api_response["Server"]

        return data


from_xml = NamecheapResponseParser.from_xml
from_transport_failure = NamecheapResponseParser.from_transport_failure
