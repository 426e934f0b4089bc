"""
Property-based tests for the command group services.

A recording transport captures what each service sends, so these tests
check command names, HTTP methods and parameter maps without a network.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from namecheap_sdk.client import ApiClient
from namecheap_sdk.dns_service import number_host_records
from namecheap_sdk.enums import HttpMethod
from namecheap_sdk.sdk import Namecheap
from namecheap_sdk.validation import AUTOFILL_FIELDS

from conftest import RecordingTransport


REGISTRANT = {
    "registrantFirstName": "Ada",
    "registrantLastName": "Lovelace",
    "registrantAddress1": "1 Analytical St",
    "registrantCity": "London",
    "registrantStateProvince": "London",
    "registrantPostalCode": "N1 9GU",
    "registrantCountry": "GB",
    "registrantPhone": "+44.2071234567",
    "registrantEmailAddress": "ada@example.com",
}

USER_PROFILE = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "address1": "1 Analytical St",
    "city": "London",
    "stateProvince": "London",
    "zip": "N1 9GU",
    "country": "GB",
    "emailAddress": "ada@example.com",
    "phone": "+44.2071234567",
}


@pytest.fixture
def nc(api_client: ApiClient) -> Namecheap:
    return Namecheap(api_client)


class TestDomainService:
    """Tests for namecheap.domains.*"""

    def test_create_autofills_contacts(self, nc: Namecheap, transport: RecordingTransport) -> None:
        response = nc.domains.create({"domainName": "example.com", "years": 2}, REGISTRANT)

        assert response.success
        sent = transport.last
        assert sent.method is HttpMethod.POST
        assert sent.params["Command"] == "namecheap.domains.create"
        assert sent.params["DomainName"] == "example.com"
        assert sent.params["Years"] == "2"
        for role in ("Tech", "Admin", "AuxBilling"):
            for field in AUTOFILL_FIELDS:
                assert sent.params[role + field] == sent.params["Registrant" + field]
        assert "PromotionCode" not in sent.params

    def test_create_keeps_explicit_role_values(self, nc: Namecheap, transport: RecordingTransport) -> None:
        contacts = dict(REGISTRANT, techCity="Paris", billingCity="Rome")

        nc.domains.create({"domainName": "example.com", "years": 1}, contacts)

        assert transport.last.params["TechCity"] == "Paris"
        assert transport.last.params["AdminCity"] == "London"
        assert transport.last.params["BillingCity"] == "Rome"

    @given(dropped=st.sets(st.sampled_from(sorted(REGISTRANT)), min_size=1))
    def test_create_missing_registrant_fields(self, dropped: set) -> None:
        """
        *For any* set of dropped registrant fields, create() SHALL return a
        [2010324] error naming them and SHALL NOT send a request.
        """
        transport = RecordingTransport()
        nc = Namecheap(ApiClient("u", "k", "n", "203.0.113.7", transport=transport))
        contacts = {k: v for k, v in REGISTRANT.items() if k not in dropped}

        response = nc.domains.create({"domainName": "example.com", "years": 1}, contacts)

        assert not response.success
        assert transport.requests == []
        error = response.errors[0]
        assert error.startswith("[2010324] ")
        assert error.endswith(" : these fields are required!")
        for key in dropped:
            assert "R" + key[1:] in error

    def test_create_requires_domain_and_years(self, nc: Namecheap, transport: RecordingTransport) -> None:
        response = nc.domains.create({"years": 0}, REGISTRANT)

        assert response.errors == ["[2010324] domainName, years : these fields are required!"]
        assert response.command == "namecheap.domains.create"
        assert transport.requests == []

    def test_set_contacts(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.domains.set_contacts("example.com", REGISTRANT, extra={"RegistrantNexus": "C11"})

        sent = transport.last
        assert sent.method is HttpMethod.POST
        assert sent.params["Command"] == "namecheap.domains.setContacts"
        assert sent.params["DomainName"] == "example.com"
        assert sent.params["RegistrantNexus"] == "C11"
        assert sent.params["AdminEmailAddress"] == "ada@example.com"

    @given(domains=st.lists(
        st.text(alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz"), min_size=1, max_size=10).map(lambda s: s + ".com"),
        min_size=1,
        max_size=5,
    ))
    def test_check_joins_domain_list(self, domains: list) -> None:
        transport = RecordingTransport()
        nc = Namecheap(ApiClient("u", "k", "n", "203.0.113.7", transport=transport))

        nc.domains.check(domains)

        assert transport.last.params["DomainList"] == ",".join(domains)
        assert transport.last.params["Command"] == "namecheap.domains.check"

    def test_get_list_drops_unset_parameters(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.domains.get_list(page=2)

        params = transport.last.params
        assert params["Page"] == "2"
        assert "ListType" not in params
        assert "SortBy" not in params

    @pytest.mark.parametrize("call, command", [
        (lambda nc: nc.domains.get_contacts("example.com"), "namecheap.domains.getContacts"),
        (lambda nc: nc.domains.get_tld_list(), "namecheap.domains.getTldList"),
        (lambda nc: nc.domains.reactivate("example.com"), "namecheap.domains.reactivate"),
        (lambda nc: nc.domains.renew("example.com", 1), "namecheap.domains.renew"),
        (lambda nc: nc.domains.get_registrar_lock("example.com"), "namecheap.domains.getRegistrarLock"),
        (lambda nc: nc.domains.set_registrar_lock("example.com", "LOCK"), "namecheap.domains.setRegistrarLock"),
        (lambda nc: nc.domains.get_info("example.com"), "namecheap.domains.getInfo"),
        (lambda nc: nc.dns.set_default("example", "com"), "namecheap.domains.dns.setDefault"),
        (lambda nc: nc.dns.get_list("example", "com"), "namecheap.domains.dns.getList"),
        (lambda nc: nc.dns.get_hosts("example", "com"), "namecheap.domains.dns.getHosts"),
        (lambda nc: nc.dns.get_email_forwarding("example.com"), "namecheap.domains.dns.getEmailForwarding"),
        (lambda nc: nc.ns.create("example", "com", "ns1.example.com", "192.0.2.1"), "namecheap.domains.ns.create"),
        (lambda nc: nc.ns.delete("example", "com", "ns1.example.com"), "namecheap.domains.ns.delete"),
        (lambda nc: nc.ns.get_info("example", "com", "ns1.example.com"), "namecheap.domains.ns.getInfo"),
        (lambda nc: nc.transfers.create("example.com", 1, "EPP"), "namecheap.domains.transfer.create"),
        (lambda nc: nc.transfers.get_status(15), "namecheap.domains.transfer.getStatus"),
        (lambda nc: nc.transfers.get_list(), "namecheap.domains.transfer.getList"),
        (lambda nc: nc.ssl.create(1, "PositiveSSL"), "namecheap.ssl.create"),
        (lambda nc: nc.ssl.get_list(), "namecheap.ssl.getList"),
        (lambda nc: nc.ssl.resend_approver_email(9), "namecheap.ssl.resendApproverEmail"),
        (lambda nc: nc.ssl.get_info(9), "namecheap.ssl.getInfo"),
        (lambda nc: nc.ssl.resend_fulfillment_email(9), "namecheap.ssl.resendfulfillmentemail"),
        (lambda nc: nc.ssl.purchase_more_sans(9, 2), "namecheap.ssl.purchasemoresans"),
        (lambda nc: nc.ssl.revoke_certificate(9, "PositiveSSL"), "namecheap.ssl.revokecertificate"),
        (lambda nc: nc.users.get_pricing(), "namecheap.users.getPricing"),
        (lambda nc: nc.users.get_balances(), "namecheap.users.getBalances"),
        (lambda nc: nc.users.get_add_funds_status("tok"), "namecheap.users.getAddFundsStatus"),
        (lambda nc: nc.users.login("pw"), "namecheap.users.login"),
        (lambda nc: nc.addresses.delete(3), "namecheap.users.address.delete"),
        (lambda nc: nc.addresses.get_info(3), "namecheap.users.address.getInfo"),
        (lambda nc: nc.addresses.get_list(), "namecheap.users.address.getList"),
        (lambda nc: nc.addresses.set_default(3), "namecheap.users.address.setDefault"),
        (lambda nc: nc.whoisguard.change_email_address(4), "namecheap.whoisguard.changeemailaddress"),
        (lambda nc: nc.whoisguard.enable(4, "me@example.com"), "namecheap.whoisguard.enable"),
        (lambda nc: nc.whoisguard.disable(4), "namecheap.whoisguard.disable"),
        (lambda nc: nc.whoisguard.unallot(4), "namecheap.whoisguard.unallot"),
        (lambda nc: nc.whoisguard.discard(4), "namecheap.whoisguard.discard"),
        (lambda nc: nc.whoisguard.allot(4, "example.com"), "namecheap.whoisguard.allot"),
        (lambda nc: nc.whoisguard.get_list(), "namecheap.whoisguard.getList"),
        (lambda nc: nc.whoisguard.renew(4), "namecheap.whoisguard.renew"),
    ])
    def test_get_commands(self, nc: Namecheap, transport: RecordingTransport, call, command: str) -> None:
        response = call(nc)

        assert response.command == command
        assert transport.last.params["Command"] == command
        assert transport.last.method is HttpMethod.GET


class TestDnsService:
    """Tests for namecheap.domains.dns.*"""

    def test_set_hosts_numbers_records(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.dns.set_hosts("example", "com", [
            {"hostName": "@", "recordType": "A", "address": "192.0.2.1", "ttl": 1800},
            {"HostName": "mail", "RecordType": "MX", "Address": "mx.example.com", "MXPref": 10},
        ], email_type="MX")

        sent = transport.last
        assert sent.method is HttpMethod.POST
        assert sent.params["Command"] == "namecheap.domains.dns.setHosts"
        assert sent.params["EmailType"] == "MX"
        assert sent.params["HostName1"] == "@"
        assert sent.params["TTL1"] == "1800"
        assert sent.params["HostName2"] == "mail"
        assert sent.params["MXPref2"] == "10"
        assert "MXPref1" not in sent.params

    @given(count=st.integers(min_value=0, max_value=10))
    def test_number_host_records(self, count: int) -> None:
        hosts = [{"hostName": f"h{i}", "recordType": "A", "address": "192.0.2.1"} for i in range(count)]

        params = number_host_records(hosts)

        assert len(params) == count * 3
        for i in range(count):
            assert params[f"HostName{i + 1}"] == f"h{i}"

    def test_set_custom_joins_nameservers(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.dns.set_custom("example", "com", ["ns1.example.net", "ns2.example.net"])

        assert transport.last.params["Nameservers"] == "ns1.example.net,ns2.example.net"

    def test_set_email_forwarding(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.dns.set_email_forwarding("example.com", {"info": "a@example.net", "sales": "b@example.net"})

        params = transport.last.params
        assert params["MailBox1"] == "info"
        assert params["ForwardTo1"] == "a@example.net"
        assert params["MailBox2"] == "sales"
        assert params["ForwardTo2"] == "b@example.net"


class TestNsAndTransferServices:
    """Tests for nameserver and transfer parameters."""

    def test_ns_update(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.ns.update("example", "com", "ns1.example.com", "192.0.2.1", "192.0.2.2")

        params = transport.last.params
        assert params["Command"] == "namecheap.domains.ns.update"
        assert params["OldIP"] == "192.0.2.1"
        assert params["IP"] == "192.0.2.2"

    def test_transfer_update_status(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.transfers.update_status(15)

        params = transport.last.params
        assert params["Command"] == "namecheap.domains.transfer.updateStatus"
        assert params["Resubmit"] == "true"


class TestSslService:
    """Tests for namecheap.ssl.*"""

    @pytest.mark.parametrize("call, name", [
        (lambda ssl: ssl.activate(1, "csr", "admin@example.com"), "activate"),
        (lambda ssl: ssl.reissue(1, "csr", "admin@example.com"), "reissue"),
        (lambda ssl: ssl.edit_dcv_method(1), "editDCVMethod"),
    ])
    def test_unsupported_commands(self, nc: Namecheap, transport: RecordingTransport, call, name: str) -> None:
        response = call(nc.ssl)

        assert not response.success
        assert response.errors == [f"namecheap.ssl.{name} is not implemented by this client"]
        assert transport.requests == []

    @pytest.mark.parametrize("call, command", [
        (lambda ssl: ssl.parse_csr("-----BEGIN CERTIFICATE REQUEST-----"), "namecheap.ssl.parseCSR"),
        (lambda ssl: ssl.get_approver_email_list("example.com", "PositiveSSL"), "namecheap.ssl.getApproverEmailList"),
        (lambda ssl: ssl.renew(9, 1, "PositiveSSL"), "namecheap.ssl.renew"),
    ])
    def test_post_commands(self, nc: Namecheap, transport: RecordingTransport, call, command: str) -> None:
        call(nc.ssl)

        assert transport.last.method is HttpMethod.POST
        assert transport.last.params["Command"] == command


class TestUserServices:
    """Tests for namecheap.users.* and namecheap.users.address.*"""

    def test_update_maps_user_fields(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.users.update(dict(USER_PROFILE, organization="Acme"))

        params = transport.last.params
        assert params["Command"] == "namecheap.users.update"
        assert params["Zip"] == "N1 9GU"
        assert params["Organization"] == "Acme"
        assert "PostalCode" not in params

    def test_update_missing_fields(self, nc: Namecheap, transport: RecordingTransport) -> None:
        response = nc.users.update({"firstName": "Ada"})

        assert response.errors[0].startswith("[2010324] lastName, address1")
        assert transport.requests == []

    def test_create_user(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.users.create(dict(USER_PROFILE, newUserName="ada", newUserPassword="pw", acceptTerms=1))

        params = transport.last.params
        assert params["Command"] == "namecheap.users.create"
        assert params["NewUserName"] == "ada"
        assert params["AcceptTerms"] == "1"
        assert "AcceptNews" not in params

    def test_create_user_requires_terms(self, nc: Namecheap) -> None:
        response = nc.users.create(dict(USER_PROFILE, newUserName="ada", newUserPassword="pw", acceptTerms=0))

        assert response.errors == ["[2010324] acceptTerms : these fields are required!"]

    @pytest.mark.parametrize("call, command", [
        (lambda users: users.reset_password("ada@example.com"), "namecheap.users.resetPassword"),
        (lambda users: users.change_password("CODE", "new", reset_password=True), "namecheap.users.changePassword"),
        (
            lambda users: users.create_add_funds_request("ada", "creditcard", 10, "https://example.com/return"),
            "namecheap.users.createaddfundsrequest",
        ),
    ])
    def test_calls_without_user_name(self, nc: Namecheap, transport: RecordingTransport, call, command: str) -> None:
        call(nc.users)

        assert transport.last.params["Command"] == command
        assert "UserName" not in transport.last.params

    def test_change_password_keeps_user_name(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.users.change_password("old", "new")

        params = transport.last.params
        assert params["UserName"] == "username"
        assert params["OldPassword"] == "old"

    def test_address_create(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.addresses.create(dict(
            USER_PROFILE,
            addressName="Home",
            stateProvinceChoice="S",
            defaultYN=1,
        ))

        params = transport.last.params
        assert params["Command"] == "namecheap.users.address.create"
        assert params["AddressName"] == "Home"
        assert params["StateProvinceChoice"] == "S"
        assert params["DefaultYN"] == "1"
        assert params["Zip"] == "N1 9GU"

    def test_address_update_requires_id(self, nc: Namecheap, transport: RecordingTransport) -> None:
        response = nc.addresses.update(dict(USER_PROFILE, addressName="Home", stateProvinceChoice="S"))

        assert response.errors == ["[2010324] addressId : these fields are required!"]
        assert transport.requests == []

    def test_address_update(self, nc: Namecheap, transport: RecordingTransport) -> None:
        nc.addresses.update(dict(USER_PROFILE, addressId=7, addressName="Home", stateProvinceChoice="S"))

        assert transport.last.params["AddressId"] == "7"
        assert transport.last.params["Command"] == "namecheap.users.address.update"


class TestFacade:
    """Tests for the Namecheap facade."""

    def test_services_share_client(self, nc: Namecheap, api_client: ApiClient) -> None:
        for service in (nc.domains, nc.dns, nc.ns, nc.transfers, nc.ssl, nc.users, nc.addresses, nc.whoisguard):
            assert service.client is api_client

    def test_context_manager_closes_owned_transport(self) -> None:
        client = ApiClient("u", "k", "n", "203.0.113.7")
        with Namecheap(client) as nc:
            assert nc.client is client
        assert client._transport is None
