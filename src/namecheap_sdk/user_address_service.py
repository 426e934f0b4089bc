"""
User address service: namecheap.users.address.* commands.
"""

from typing import Any, Mapping

from .base_service import ApiService
from .contact_builder import ContactBuilder, normalize_input
from .enums import ServiceClass
from .models import NamecheapResponse
from .validation import missing_fields


ADDRESS_REQUIRED_FIELDS: tuple[str, ...] = (
    "addressName",
    "firstName",
    "lastName",
    "address1",
    "city",
    "stateProvince",
    "stateProvinceChoice",
    "postalCode",
    "country",
    "emailAddress",
    "phone",
)


class UserAddressService(ApiService):
    """Address book of the user account."""

    COMMAND_PREFIX = "namecheap.users.address."

    def create(self, address_info: Mapping[str, Any]) -> NamecheapResponse:
        """
        Add an address.

        Args:
            address_info: addressName, emailAddress, firstName, lastName,
                address1, city, stateProvince, stateProvinceChoice, zip (or
                postalCode), country, phone (required); defaultYN, jobTitle,
                organization, address2, phoneExt, fax (optional)
        """
        missing = missing_fields(normalize_input(address_info), ADDRESS_REQUIRED_FIELDS)
        if missing:
            return self._missing_fields_response(missing, "create")

        data = ContactBuilder(ServiceClass.USER_ADDRESS).build(address_info)
        return self._client.get(self.command("create"), data)

    def delete(self, address_id: int) -> NamecheapResponse:
        return self._client.get(self.command("delete"), {"AddressId": address_id})

    def get_info(self, address_id: int) -> NamecheapResponse:
        return self._client.get(self.command("getInfo"), {"AddressId": address_id})

    def get_list(self) -> NamecheapResponse:
        return self._client.get(self.command("getList"))

    def set_default(self, address_id: int) -> NamecheapResponse:
        return self._client.get(self.command("setDefault"), {"AddressId": address_id})

    def update(self, address_info: Mapping[str, Any]) -> NamecheapResponse:
        """Update an address; takes the create() fields plus addressId."""
        required = ("addressId",) + ADDRESS_REQUIRED_FIELDS
        missing = missing_fields(normalize_input(address_info), required)
        if missing:
            return self._missing_fields_response(missing, "update")

        data = ContactBuilder(ServiceClass.USER_ADDRESS).build(address_info)
        data["AddressId"] = address_info["addressId"]
        return self._client.get(self.command("update"), data)
