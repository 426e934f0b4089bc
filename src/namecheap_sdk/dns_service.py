"""
DNS service: namecheap.domains.dns.* commands.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from .base_service import ApiService
from .models import NamecheapResponse


# caller key -> provider parameter stem for setHosts
_HOST_RECORD_FIELDS: dict[str, str] = {
    "hostName": "HostName",
    "recordType": "RecordType",
    "address": "Address",
    "mxPref": "MXPref",
    "ttl": "TTL",
}


def number_host_records(hosts: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
    """
    Number host records the way setHosts expects them.

    ``[{"hostName": "@", "recordType": "A", "address": "203.0.113.7"}]``
    becomes ``{"HostName1": "@", "RecordType1": "A", "Address1": "203.0.113.7"}``.
    Provider names (``HostName``, ``TTL``, ...) are accepted as keys too.
    """
    params = {}
    for index, host in enumerate(hosts, start=1):
        for field, stem in _HOST_RECORD_FIELDS.items():
            value = host.get(field, host.get(stem))
            if value is not None:
                params[f"{stem}{index}"] = value
    return params


class DomainDnsService(ApiService):
    """Nameserver selection, host records and email forwarding."""

    COMMAND_PREFIX = "namecheap.domains.dns."

    def set_default(self, sld: str, tld: str) -> NamecheapResponse:
        """Switch a domain to Namecheap's default DNS servers."""
        return self._client.get(self.command("setDefault"), {"SLD": sld, "TLD": tld})

    def set_custom(
        self,
        sld: str,
        tld: str,
        nameservers: Union[str, Sequence[str]],
    ) -> NamecheapResponse:
        """Switch a domain to custom nameservers (comma-separated or a list)."""
        if not isinstance(nameservers, str):
            nameservers = ",".join(nameservers)
        return self._client.get(self.command("setCustom"), {
            "SLD": sld,
            "TLD": tld,
            "Nameservers": nameservers,
        })

    def get_list(self, sld: str, tld: str) -> NamecheapResponse:
        return self._client.get(self.command("getList"), {"SLD": sld, "TLD": tld})

    def get_hosts(self, sld: str, tld: str) -> NamecheapResponse:
        return self._client.get(self.command("getHosts"), {"SLD": sld, "TLD": tld})

    def get_email_forwarding(self, domain_name: str) -> NamecheapResponse:
        return self._client.get(self.command("getEmailForwarding"), {"DomainName": domain_name})

    def set_email_forwarding(
        self,
        domain_name: str,
        forwards: Union[Mapping[str, str], Sequence[tuple[str, str]]],
    ) -> NamecheapResponse:
        """
        Set email forwarding for a domain.

        Args:
            domain_name: Domain to configure
            forwards: Mailbox -> destination address, as a mapping or pairs
                (``{"info": "info@example.com"}``)
        """
        pairs = forwards.items() if isinstance(forwards, Mapping) else forwards
        data: dict[str, Any] = {"DomainName": domain_name}
        for index, (mailbox, forward_to) in enumerate(pairs, start=1):
            data[f"MailBox{index}"] = mailbox
            data[f"ForwardTo{index}"] = forward_to
        return self._client.get(self.command("setEmailForwarding"), data)

    def set_hosts(
        self,
        sld: str,
        tld: str,
        hosts: Sequence[Mapping[str, Any]],
        email_type: Optional[str] = None,
    ) -> NamecheapResponse:
        """
        Replace all host records of a domain.

        Records not included are deleted by the provider. Sent as POST so
        that large record sets fit.

        Args:
            sld: Second-level domain
            tld: Top-level domain
            hosts: Records with hostName, recordType (A, AAAA, CNAME, MX,
                MXE, NS, TXT, URL, URL301, FRAME), address and optional
                mxPref and ttl (60-60000)
            email_type: MXE, MX, FWD or OX
        """
        data: dict[str, Any] = {"SLD": sld, "TLD": tld, "EmailType": email_type}
        data.update(number_host_records(hosts))
        return self._client.post(self.command("setHosts"), data)
