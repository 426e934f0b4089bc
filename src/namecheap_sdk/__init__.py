"""
Namecheap SDK - typed client for the Namecheap XML API.

This package wraps the domain, DNS, SSL, user, address and WhoisGuard
command groups and normalizes every reply, including failures, into a
single NamecheapResponse shape.
"""

__version__ = "0.1.0"

from namecheap_sdk.exceptions import (
    NamecheapError,
    XmlParseError,
    TransportError,
    ConfigurationError,
)
from namecheap_sdk.enums import (
    ServiceClass,
    ContactRole,
    HttpMethod,
    ClientErrorCode,
    LogLevel,
)
from namecheap_sdk.models import (
    NamecheapResponse,
    TransportResult,
)
from namecheap_sdk.field_mapper import (
    REQUIRED_CONTACT_FIELDS,
    OPTIONAL_CONTACT_FIELDS,
    mappings_for,
    supported_roles,
)
from namecheap_sdk.contact_builder import (
    ContactBuilder,
    build_contacts,
)
from namecheap_sdk.validation import (
    autofill_from_registrant,
    missing_fields,
)
from namecheap_sdk.xml_tree import (
    TEXT_KEY,
    ATTRIBUTE_PREFIX,
    as_list,
    convert,
    xml_to_tree,
)
from namecheap_sdk.response_parser import (
    NamecheapResponseParser,
    from_xml,
    from_transport_failure,
)
from namecheap_sdk.config import (
    CredentialsConfig,
    TransportConfig,
    LoggingConfig,
    ClientConfig,
    PRODUCTION_ENDPOINT,
    SANDBOX_ENDPOINT,
    load_config_from_file,
    load_config_from_env,
    save_config_to_file,
)
from namecheap_sdk.audit_logger import AuditLogger, LogEntry
from namecheap_sdk.transport import HttpTransport, Transport
from namecheap_sdk.client import ApiClient
from namecheap_sdk.base_service import ApiService
from namecheap_sdk.domain_service import DomainService
from namecheap_sdk.dns_service import DomainDnsService
from namecheap_sdk.ns_service import DomainNsService
from namecheap_sdk.transfer_service import DomainTransferService
from namecheap_sdk.ssl_service import SslService
from namecheap_sdk.user_service import UserService
from namecheap_sdk.user_address_service import UserAddressService
from namecheap_sdk.whoisguard_service import WhoisguardService
from namecheap_sdk.sdk import Namecheap

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "NamecheapError",
    "XmlParseError",
    "TransportError",
    "ConfigurationError",
    # Enums
    "ServiceClass",
    "ContactRole",
    "HttpMethod",
    "ClientErrorCode",
    "LogLevel",
    # Models
    "NamecheapResponse",
    "TransportResult",
    # Contacts
    "REQUIRED_CONTACT_FIELDS",
    "OPTIONAL_CONTACT_FIELDS",
    "mappings_for",
    "supported_roles",
    "ContactBuilder",
    "build_contacts",
    "autofill_from_registrant",
    "missing_fields",
    # XML
    "TEXT_KEY",
    "ATTRIBUTE_PREFIX",
    "as_list",
    "convert",
    "xml_to_tree",
    # Responses
    "NamecheapResponseParser",
    "from_xml",
    "from_transport_failure",
    # Config
    "CredentialsConfig",
    "TransportConfig",
    "LoggingConfig",
    "ClientConfig",
    "PRODUCTION_ENDPOINT",
    "SANDBOX_ENDPOINT",
    "load_config_from_file",
    "load_config_from_env",
    "save_config_to_file",
    # Logging
    "AuditLogger",
    "LogEntry",
    # Client and services
    "HttpTransport",
    "Transport",
    "ApiClient",
    "ApiService",
    "DomainService",
    "DomainDnsService",
    "DomainNsService",
    "DomainTransferService",
    "SslService",
    "UserService",
    "UserAddressService",
    "WhoisguardService",
    "Namecheap",
]
