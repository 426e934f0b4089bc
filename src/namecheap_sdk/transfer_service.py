"""
Transfer service: namecheap.domains.transfer.* commands.
"""

from typing import Optional

from .base_service import ApiService
from .models import NamecheapResponse


class DomainTransferService(ApiService):
    """Inbound domain transfers."""

    COMMAND_PREFIX = "namecheap.domains.transfer."

    def create(
        self,
        domain_name: str,
        years: int,
        epp_code: str,
        promotion_code: Optional[str] = None,
        add_free_whoisguard: Optional[str] = None,
        wg_enable: Optional[str] = None,
    ) -> NamecheapResponse:
        """
        Transfer a domain to Namecheap.

        Args:
            domain_name: Domain to transfer
            years: Years to renew after a successful transfer
            epp_code: Authorization (EPP) code from the losing registrar
            promotion_code: Coupon code
            add_free_whoisguard: 'yes' or 'no'
            wg_enable: 'yes' or 'no'
        """
        return self._client.get(self.command("create"), {
            "DomainName": domain_name,
            "Years": years,
            "EPPCode": epp_code,
            "PromotionCode": promotion_code,
            "AddFreeWhoisguard": add_free_whoisguard,
            "WGEnable": wg_enable,
        })

    def get_status(self, transfer_id: int) -> NamecheapResponse:
        return self._client.get(self.command("getStatus"), {"TransferID": transfer_id})

    def update_status(self, transfer_id: int, resubmit: bool = True) -> NamecheapResponse:
        """Resubmit a transfer after the registry lock was released."""
        return self._client.get(self.command("updateStatus"), {
            "TransferID": transfer_id,
            "Resubmit": resubmit,
        })

    def get_list(
        self,
        list_type: Optional[str] = None,
        search_term: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> NamecheapResponse:
        return self._client.get(self.command("getList"), {
            "ListType": list_type,
            "SearchTerm": search_term,
            "Page": page,
            "PageSize": page_size,
            "SortBy": sort_by,
        })
