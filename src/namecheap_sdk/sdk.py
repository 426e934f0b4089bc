"""
Entry point bundling the client and every service.
"""

from typing import Optional

from .audit_logger import AuditLogger
from .client import ApiClient
from .config import ClientConfig, normalize_log_level, normalize_output_format
from .dns_service import DomainDnsService
from .domain_service import DomainService
from .enums import LogLevel
from .exceptions import ConfigurationError
from .ns_service import DomainNsService
from .ssl_service import SslService
from .transfer_service import DomainTransferService
from .transport import Transport
from .user_address_service import UserAddressService
from .user_service import UserService
from .whoisguard_service import WhoisguardService


def create_logger(config: ClientConfig) -> Optional[AuditLogger]:
    """
    Create the audit logger described by the config, if enabled.

    Raises:
        ConfigurationError: If the logging level or output format is unknown
    """
    if not config.logging.enabled:
        return None
    try:
        level = normalize_log_level(config.logging.level)
        output_format = normalize_output_format(config.logging.output_format)
    except ValueError as e:
        raise ConfigurationError(code="invalid_logging", message=str(e)) from e
    return AuditLogger(output_format=output_format, level=LogLevel(level))


class Namecheap:
    """
    All Namecheap API services sharing one client.

    Usage:
        with Namecheap.from_config(load_config_from_env()) as nc:
            response = nc.domains.check(["example.com", "example.net"])
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client
        self.domains = DomainService(client)
        self.dns = DomainDnsService(client)
        self.ns = DomainNsService(client)
        self.transfers = DomainTransferService(client)
        self.ssl = SslService(client)
        self.users = UserService(client)
        self.addresses = UserAddressService(client)
        self.whoisguard = WhoisguardService(client)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[Transport] = None,
        logger: Optional[AuditLogger] = None,
    ) -> "Namecheap":
        """Build the client from a ClientConfig."""
        return cls(ApiClient.from_config(
            config,
            transport=transport,
            logger=logger or create_logger(config),
        ))

    def __enter__(self) -> "Namecheap":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()
