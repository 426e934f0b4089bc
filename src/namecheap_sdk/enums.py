"""
Enumeration types for the Namecheap SDK.

These enums provide type-safe constants for service contexts, contact roles,
request methods, client-side error codes and log levels.
"""

from enum import Enum, IntEnum


class ServiceClass(Enum):
    """Service context selecting the contact field mapping rules."""

    DOMAIN = "domain"
    USER = "user"
    USER_ADDRESS = "user_address"

    def field_mappings(self):
        """Get the normalized -> provider field name table for this context."""
        from .field_mapper import mappings_for

        return mappings_for(self)

    def supported_contact_types(self) -> tuple:
        """Get the contact roles this context builds (empty for user contexts)."""
        from .field_mapper import supported_roles

        return supported_roles(self)


class ContactRole(Enum):
    """Contact roles used for domain registration."""

    REGISTRANT = "registrant"
    TECH = "tech"
    ADMIN = "admin"
    AUX_BILLING = "auxBilling"
    BILLING = "billing"

    @property
    def prefix(self) -> str:
        """Provider parameter prefix, e.g. 'AuxBilling'."""
        return self.value[0].upper() + self.value[1:]


class HttpMethod(Enum):
    """HTTP methods accepted by the API endpoint."""

    GET = "GET"
    POST = "POST"


class ClientErrorCode(IntEnum):
    """Error codes for failures detected before reaching the provider."""

    NONE = 0
    AUTHENTICATION_REQUIRED = 1010101
    MISSING_REQUIRED_FIELDS = 2010324


class LogLevel(Enum):
    """Logging severity levels."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
