"""
Contact builder for provider request parameters.

Turns loosely named caller data into the flat parameter map the provider
expects. Domain contacts arrive as one map with role-prefixed keys
(``registrantFirstName``, ``techCity``, ...) and are expanded per role;
user and user-address data is a single flat map.

The builder never rejects input: unknown or absent fields are skipped.
Required-field checks belong to the calling service.
"""

from typing import Any, Mapping

from .enums import ContactRole, ServiceClass
from .field_mapper import all_contact_fields, mappings_for, supported_roles


# alias -> canonical field name
FIELD_ALIASES: dict[str, str] = {
    "zip": "postalCode",
    "organization": "organizationName",
}


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def normalize_input(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Resolve field name aliases.

    An alias is copied onto its canonical name only when the canonical
    field is not supplied, so the canonical value stays authoritative.

    Args:
        data: Caller supplied field map

    Returns:
        New dict with canonical names filled in
    """
    normalized = dict(data)
    for alias, canonical in FIELD_ALIASES.items():
        if data.get(alias) is not None and data.get(canonical) is None:
            normalized[canonical] = data[alias]
    return normalized


def extract_role_fields(data: Mapping[str, Any], role: ContactRole) -> dict[str, Any]:
    """
    Pull the fields of one contact role out of role-prefixed data.

    ``{"techFirstName": "B"}`` yields ``{"firstName": "B"}`` for TECH.
    """
    extracted = {}
    for field in all_contact_fields() + tuple(FIELD_ALIASES):
        value = data.get(role.value + _capitalize(field))
        if value is not None:
            extracted[field] = value
    return extracted


class ContactBuilder:
    """
    Builds provider-ready contact parameters for one service context.

    Usage:
        params = ContactBuilder(ServiceClass.USER).build({"firstName": "Ada"})
        # {"FirstName": "Ada"}
    """

    def __init__(self, context: ServiceClass) -> None:
        self._context = context

    @property
    def context(self) -> ServiceClass:
        return self._context

    def build(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Build the parameter map for the configured context.

        Args:
            data: Caller data; role-prefixed for DOMAIN, flat otherwise

        Returns:
            Flat map of provider parameter name to value
        """
        if self._context is ServiceClass.DOMAIN:
            return self._build_domain_contacts(data)
        if self._context in (ServiceClass.USER, ServiceClass.USER_ADDRESS):
            return self._map_fields(data)
        raise ValueError(f"Unknown service context: {self._context!r}")

    def _build_domain_contacts(self, data: Mapping[str, Any]) -> dict[str, Any]:
        contacts: dict[str, Any] = {}
        for role in supported_roles(self._context):
            role_data = extract_role_fields(data, role)
            if not role_data:
                continue
            for key, value in self._map_fields(role_data, role.prefix).items():
                contacts.setdefault(key, value)
        return contacts

    def _map_fields(self, data: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
        normalized = normalize_input(data)
        mapped = {}
        for field, api_field in mappings_for(self._context).items():
            value = normalized.get(field)
            if value is not None:
                mapped[prefix + api_field] = value
        return mapped


def build_contacts(context: ServiceClass, data: Mapping[str, Any]) -> dict[str, Any]:
    """Build provider contact parameters for ``context`` from ``data``."""
    return ContactBuilder(context).build(data)
