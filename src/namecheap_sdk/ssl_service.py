"""
SSL service: namecheap.ssl.* commands.
"""

from typing import Optional

from .base_service import ApiService
from .models import NamecheapResponse
from .response_parser import NamecheapResponseParser


class SslService(ApiService):
    """
    SSL certificate purchase and lifecycle.

    activate(), reissue() and edit_dcv_method() are not supported by this
    client and return an error response without calling the API.
    """

    COMMAND_PREFIX = "namecheap.ssl."

    def create(
        self,
        years: int,
        certificate_type: str,
        sans_to_add: Optional[int] = None,
        promotion_code: Optional[str] = None,
    ) -> NamecheapResponse:
        """
        Purchase a certificate.

        Args:
            years: 1 or 2
            certificate_type: Product name, e.g. 'PositiveSSL', 'EV SSL'
            sans_to_add: Add-on domains for multi-domain products
            promotion_code: Coupon code
        """
        return self._client.get(self.command("create"), {
            "Years": years,
            "Type": certificate_type,
            "SANStoADD": sans_to_add,
            "PromotionCode": promotion_code,
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

    def parse_csr(self, csr: str, certificate_type: Optional[str] = None) -> NamecheapResponse:
        return self._client.post(self.command("parseCSR"), {
            "csr": csr,
            "CertificateType": certificate_type,
        })

    def get_approver_email_list(self, domain_name: str, certificate_type: str) -> NamecheapResponse:
        return self._client.post(self.command("getApproverEmailList"), {
            "DomainName": domain_name,
            "CertificateType": certificate_type,
        })

    def activate(
        self,
        certificate_id: int,
        csr: str,
        admin_email_address: str,
        web_server_type: Optional[str] = None,
    ) -> NamecheapResponse:
        return self._not_implemented("activate")

    def reissue(
        self,
        certificate_id: int,
        csr: str,
        admin_email_address: str,
        web_server_type: Optional[str] = None,
    ) -> NamecheapResponse:
        return self._not_implemented("reissue")

    def edit_dcv_method(self, certificate_id: int) -> NamecheapResponse:
        return self._not_implemented("editDCVMethod")

    def resend_approver_email(self, certificate_id: int) -> NamecheapResponse:
        return self._client.get(self.command("resendApproverEmail"), {"CertificateID": certificate_id})

    def get_info(
        self,
        certificate_id: int,
        return_certificate: Optional[bool] = None,
        return_type: Optional[str] = None,
    ) -> NamecheapResponse:
        """Get certificate details; return_type is 'Individual' or 'PKCS7'."""
        return self._client.get(self.command("getInfo"), {
            "CertificateID": certificate_id,
            "Returncertificate": return_certificate,
            "Returntype": return_type,
        })

    def renew(
        self,
        certificate_id: int,
        years: int,
        ssl_type: str,
        promotion_code: Optional[str] = None,
    ) -> NamecheapResponse:
        return self._client.post(self.command("renew"), {
            "CertificateID": certificate_id,
            "Years": years,
            "SSLType": ssl_type,
            "PromotionCode": promotion_code,
        })

    def resend_fulfillment_email(self, certificate_id: int) -> NamecheapResponse:
        return self._client.get(self.command("resendfulfillmentemail"), {"CertificateID": certificate_id})

    def purchase_more_sans(self, certificate_id: int, number_of_sans_to_add: int) -> NamecheapResponse:
        return self._client.get(self.command("purchasemoresans"), {
            "CertificateID": certificate_id,
            "NumberOfSANSToAdd": number_of_sans_to_add,
        })

    def revoke_certificate(self, certificate_id: int, certificate_type: str) -> NamecheapResponse:
        return self._client.get(self.command("revokecertificate"), {
            "CertificateID": certificate_id,
            "CertificateType": certificate_type,
        })

    def _not_implemented(self, name: str) -> NamecheapResponse:
        command = self.command(name)
        return NamecheapResponseParser.from_transport_failure(
            f"{command} is not implemented by this client",
            command,
            0.0,
        )
