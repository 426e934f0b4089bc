"""
Field mapping tables for contact data.

Maps the normalized field names callers use (``firstName``, ``postalCode``,
...) to the parameter names the provider expects in each service context.
The tables are written out by hand because the provider's names differ
irregularly between contexts: ``postalCode`` is ``PostalCode`` for domain
contacts but ``Zip`` for users and user addresses, ``organizationName`` is
``OrganizationName`` for domains but ``Organization`` elsewhere.
"""

from types import MappingProxyType
from typing import Mapping

from .enums import ContactRole, ServiceClass


# Fields every contact must carry
REQUIRED_CONTACT_FIELDS: tuple[str, ...] = (
    "firstName",
    "lastName",
    "address1",
    "city",
    "stateProvince",
    "postalCode",
    "country",
    "phone",
    "emailAddress",
)

OPTIONAL_CONTACT_FIELDS: tuple[str, ...] = (
    "organizationName",
    "jobTitle",
    "address2",
    "stateProvinceChoice",
    "phoneExt",
    "fax",
)


_DOMAIN_FIELDS = MappingProxyType({
    "firstName": "FirstName",
    "lastName": "LastName",
    "address1": "Address1",
    "address2": "Address2",
    "city": "City",
    "stateProvince": "StateProvince",
    "stateProvinceChoice": "StateProvinceChoice",
    "postalCode": "PostalCode",
    "country": "Country",
    "phone": "Phone",
    "phoneExt": "PhoneExt",
    "emailAddress": "EmailAddress",
    "organizationName": "OrganizationName",
    "jobTitle": "JobTitle",
    "fax": "Fax",
})

_USER_FIELDS = MappingProxyType({
    "firstName": "FirstName",
    "lastName": "LastName",
    "address1": "Address1",
    "address2": "Address2",
    "city": "City",
    "stateProvince": "StateProvince",
    "postalCode": "Zip",
    "country": "Country",
    "phone": "Phone",
    "phoneExt": "PhoneExt",
    "emailAddress": "EmailAddress",
    "organizationName": "Organization",
    "jobTitle": "JobTitle",
    "fax": "Fax",
})

_USER_ADDRESS_FIELDS = MappingProxyType({
    "firstName": "FirstName",
    "lastName": "LastName",
    "address1": "Address1",
    "address2": "Address2",
    "city": "City",
    "stateProvince": "StateProvince",
    "stateProvinceChoice": "StateProvinceChoice",
    "postalCode": "Zip",
    "country": "Country",
    "phone": "Phone",
    "phoneExt": "PhoneExt",
    "emailAddress": "EmailAddress",
    "organizationName": "Organization",
    "jobTitle": "JobTitle",
    "fax": "Fax",
    "addressName": "AddressName",
    "defaultYN": "DefaultYN",
})

_DOMAIN_ROLES: tuple[ContactRole, ...] = (
    ContactRole.REGISTRANT,
    ContactRole.TECH,
    ContactRole.ADMIN,
    ContactRole.AUX_BILLING,
    ContactRole.BILLING,
)


def mappings_for(context: ServiceClass) -> Mapping[str, str]:
    """
    Get the field mapping table for a service context.

    Keys absent from a table are simply not applicable to that context.

    Args:
        context: The service context

    Returns:
        Read-only mapping of normalized field name to provider field name
    """
    if context is ServiceClass.DOMAIN:
        return _DOMAIN_FIELDS
    if context is ServiceClass.USER:
        return _USER_FIELDS
    if context is ServiceClass.USER_ADDRESS:
        return _USER_ADDRESS_FIELDS
    raise ValueError(f"Unknown service context: {context!r}")


def supported_roles(context: ServiceClass) -> tuple[ContactRole, ...]:
    """Get the contact roles built for a context, in build order."""
    if context is ServiceClass.DOMAIN:
        return _DOMAIN_ROLES
    return ()


def all_contact_fields() -> tuple[str, ...]:
    """Get all per-role contact fields (required first, then optional)."""
    return REQUIRED_CONTACT_FIELDS + OPTIONAL_CONTACT_FIELDS
