"""
Domain service: namecheap.domains.* commands.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from .base_service import ApiService
from .contact_builder import ContactBuilder
from .enums import ServiceClass
from .models import NamecheapResponse
from .validation import autofill_from_registrant, missing_fields


REGISTRANT_REQUIRED_FIELDS: tuple[str, ...] = (
    "RegistrantFirstName",
    "RegistrantLastName",
    "RegistrantAddress1",
    "RegistrantCity",
    "RegistrantStateProvince",
    "RegistrantPostalCode",
    "RegistrantCountry",
    "RegistrantPhone",
    "RegistrantEmailAddress",
)

# caller key -> provider parameter for domains.create
_REGISTRATION_FIELDS: dict[str, str] = {
    "domainName": "DomainName",
    "years": "Years",
    "promotionCode": "PromotionCode",
    "idnCode": "IdnCode",
    "nameservers": "Nameservers",
    "addFreeWhoisguard": "AddFreeWhoisguard",
    "wGEnabled": "WGEnabled",
    "isPremiumDomain": "IsPremiumDomain",
    "premiumPrice": "PremiumPrice",
    "eapFee": "EapFee",
}


class DomainService(ApiService):
    """Domain registration, listing, renewal and contact management."""

    COMMAND_PREFIX = "namecheap.domains."

    def get_list(
        self,
        search_term: Optional[str] = None,
        list_type: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> NamecheapResponse:
        """
        List the user's domains.

        Args:
            search_term: Keyword to look for in the domain list
            list_type: ALL, EXPIRING or EXPIRED
            page: Page to return
            page_size: Domains per page (10-100)
            sort_by: NAME, NAME_DESC, EXPIREDATE, EXPIREDATE_DESC, CREATEDATE, CREATEDATE_DESC
        """
        return self._client.get(self.command("getList"), {
            "ListType": list_type,
            "SearchTerm": search_term,
            "Page": page,
            "PageSize": page_size,
            "SortBy": sort_by,
        })

    def get_contacts(self, domain_name: str) -> NamecheapResponse:
        return self._client.get(self.command("getContacts"), {"DomainName": domain_name})

    def create(
        self,
        domain_info: Mapping[str, Any],
        contact_info: Mapping[str, Any],
    ) -> NamecheapResponse:
        """
        Register a new domain.

        Args:
            domain_info: domainName and years (required), plus optional
                promotionCode, idnCode, nameservers, addFreeWhoisguard,
                wGEnabled, isPremiumDomain, premiumPrice, eapFee
            contact_info: Role-prefixed contact fields (registrantFirstName,
                techCity, billingPhone, ...). Registrant fields are required;
                empty tech/admin/auxBilling fields are copied from the registrant.

        Returns:
            NamecheapResponse; a [2010324] error without a network call if
            required fields are missing
        """
        missing = missing_fields(domain_info, ("domainName", "years"))
        contacts = ContactBuilder(ServiceClass.DOMAIN).build(contact_info)
        missing += missing_fields(contacts, REGISTRANT_REQUIRED_FIELDS)
        if missing:
            return self._missing_fields_response(missing, "create")

        data = {
            api_field: domain_info.get(field)
            for field, api_field in _REGISTRATION_FIELDS.items()
        }
        data.update(autofill_from_registrant(contacts))

        return self._client.post(self.command("create"), data)

    def set_contacts(
        self,
        domain_name: str,
        contact_info: Mapping[str, Any],
        extra: Optional[Mapping[str, Any]] = None,
    ) -> NamecheapResponse:
        """
        Replace the contacts of a domain.

        Args:
            domain_name: Domain to update
            contact_info: Role-prefixed contact fields, as for create()
            extra: Additional provider parameters (e.g. extended attributes)
        """
        contacts = ContactBuilder(ServiceClass.DOMAIN).build(contact_info)
        missing = missing_fields(contacts, REGISTRANT_REQUIRED_FIELDS)
        if missing:
            return self._missing_fields_response(missing, "setContacts")

        data: dict[str, Any] = {"DomainName": domain_name}
        data.update(extra or {})
        data.update(autofill_from_registrant(contacts))

        return self._client.post(self.command("setContacts"), data)

    def get_tld_list(self) -> NamecheapResponse:
        return self._client.get(self.command("getTldList"))

    def check(self, domains: Union[str, Sequence[str]]) -> NamecheapResponse:
        """Check availability of one domain or a list of domains."""
        domain_list = domains if isinstance(domains, str) else ",".join(domains)
        return self._client.get(self.command("check"), {"DomainList": domain_list})

    def reactivate(
        self,
        domain_name: str,
        promotion_code: Optional[str] = None,
        years_to_add: Optional[int] = None,
        is_premium_domain: Optional[bool] = None,
        premium_price: Optional[float] = None,
    ) -> NamecheapResponse:
        """Reactivate an expired domain."""
        return self._client.get(self.command("reactivate"), {
            "DomainName": domain_name,
            "PromotionCode": promotion_code,
            "YearsToAdd": years_to_add,
            "IsPremiumDomain": is_premium_domain,
            "PremiumPrice": premium_price,
        })

    def renew(
        self,
        domain_name: str,
        years: int,
        promotion_code: Optional[str] = None,
        is_premium_domain: Optional[bool] = None,
        premium_price: Optional[float] = None,
    ) -> NamecheapResponse:
        return self._client.get(self.command("renew"), {
            "DomainName": domain_name,
            "Years": years,
            "PromotionCode": promotion_code,
            "IsPremiumDomain": is_premium_domain,
            "PremiumPrice": premium_price,
        })

    def get_registrar_lock(self, domain_name: str) -> NamecheapResponse:
        return self._client.get(self.command("getRegistrarLock"), {"DomainName": domain_name})

    def set_registrar_lock(
        self,
        domain_name: str,
        lock_action: Optional[str] = None,
    ) -> NamecheapResponse:
        """Lock or unlock a domain (lock_action: LOCK or UNLOCK)."""
        return self._client.get(self.command("setRegistrarLock"), {
            "DomainName": domain_name,
            "LockAction": lock_action,
        })

    def get_info(self, domain_name: str, host_name: Optional[str] = None) -> NamecheapResponse:
        return self._client.get(self.command("getInfo"), {
            "DomainName": domain_name,
            "HostName": host_name,
        })
