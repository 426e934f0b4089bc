"""
Nameserver service: namecheap.domains.ns.* commands (glue records).
"""

from .base_service import ApiService
from .models import NamecheapResponse


class DomainNsService(ApiService):
    """Create, inspect, update and delete child nameservers."""

    COMMAND_PREFIX = "namecheap.domains.ns."

    def create(self, sld: str, tld: str, nameserver: str, ip: str) -> NamecheapResponse:
        return self._client.get(self.command("create"), {
            "SLD": sld,
            "TLD": tld,
            "Nameserver": nameserver,
            "IP": ip,
        })

    def delete(self, sld: str, tld: str, nameserver: str) -> NamecheapResponse:
        return self._client.get(self.command("delete"), {
            "SLD": sld,
            "TLD": tld,
            "Nameserver": nameserver,
        })

    def get_info(self, sld: str, tld: str, nameserver: str) -> NamecheapResponse:
        return self._client.get(self.command("getInfo"), {
            "SLD": sld,
            "TLD": tld,
            "Nameserver": nameserver,
        })

    def update(
        self,
        sld: str,
        tld: str,
        nameserver: str,
        old_ip: str,
        new_ip: str,
    ) -> NamecheapResponse:
        """Move a nameserver from old_ip to new_ip."""
        return self._client.get(self.command("update"), {
            "SLD": sld,
            "TLD": tld,
            "Nameserver": nameserver,
            "OldIP": old_ip,
            "IP": new_ip,
        })
