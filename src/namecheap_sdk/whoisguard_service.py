"""
WhoisGuard service: namecheap.whoisguard.* commands.
"""

from typing import Optional

from .base_service import ApiService
from .models import NamecheapResponse


class WhoisguardService(ApiService):
    """WHOIS privacy protection subscriptions."""

    COMMAND_PREFIX = "namecheap.whoisguard."

    def change_email_address(self, whoisguard_id: int) -> NamecheapResponse:
        return self._client.get(self.command("changeemailaddress"), {"WhoisguardID": whoisguard_id})

    def enable(self, whoisguard_id: int, forwarded_to_email: str) -> NamecheapResponse:
        return self._client.get(self.command("enable"), {
            "WhoisguardID": whoisguard_id,
            "ForwardedToEmail": forwarded_to_email,
        })

    def disable(self, whoisguard_id: int) -> NamecheapResponse:
        return self._client.get(self.command("disable"), {"WhoisguardID": whoisguard_id})

    def unallot(self, whoisguard_id: int) -> NamecheapResponse:
        return self._client.get(self.command("unallot"), {"WhoisguardID": whoisguard_id})

    def discard(self, whoisguard_id: int) -> NamecheapResponse:
        return self._client.get(self.command("discard"), {"WhoisguardID": whoisguard_id})

    def allot(
        self,
        whoisguard_id: int,
        domain_name: str,
        forwarded_to_email: Optional[str] = None,
        enable_wg: Optional[bool] = None,
    ) -> NamecheapResponse:
        """Attach a WhoisGuard subscription to a domain."""
        return self._client.get(self.command("allot"), {
            "WhoisguardID": whoisguard_id,
            "DomainName": domain_name,
            "ForwardedToEmail": forwarded_to_email,
            "EnableWG": enable_wg,
        })

    def get_list(
        self,
        list_type: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> NamecheapResponse:
        """List subscriptions; list_type is ALL, ALLOTED, FREE or DISCARD."""
        return self._client.get(self.command("getList"), {
            "ListType": list_type,
            "Page": page,
            "PageSize": page_size,
        })

    def renew(
        self,
        whoisguard_id: int,
        years: int = 1,
        promotion_code: Optional[str] = None,
    ) -> NamecheapResponse:
        return self._client.get(self.command("renew"), {
            "WhoisguardID": whoisguard_id,
            "Years": years,
            "PromotionCode": promotion_code,
        })
