"""
Required-field checks and contact auto-fill used by the services.

These run on the caller side of the contact builder: the builder maps
whatever it is given, the services decide whether that is enough to send.
"""

from typing import Any, Iterable, Mapping


# Roles filled from the registrant when left empty
AUTOFILL_ROLES: tuple[str, ...] = ("Tech", "Admin", "AuxBilling")

AUTOFILL_FIELDS: tuple[str, ...] = (
    "FirstName",
    "LastName",
    "Address1",
    "City",
    "StateProvince",
    "PostalCode",
    "Country",
    "Phone",
    "EmailAddress",
)


def is_empty(value: Any) -> bool:
    """Check whether a field value counts as not supplied."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == "" or value == "0"
    if isinstance(value, (bool, int, float)):
        return not value
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def missing_fields(data: Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """
    Get the required fields that are absent or empty.

    Args:
        data: Field map to check
        required: Field names that must be present

    Returns:
        Missing field names in the order given by ``required``
    """
    return [field for field in required if is_empty(data.get(field))]


def required_fields_message(missing: Iterable[str]) -> str:
    """Format the error message for missing required fields."""
    return f"{', '.join(missing)} : these fields are required!"


def autofill_from_registrant(contacts: Mapping[str, Any]) -> dict[str, Any]:
    """
    Copy registrant values into empty tech/admin/auxBilling fields.

    Only empty target fields are filled, and only from non-empty registrant
    fields; explicitly supplied role values are never overwritten.

    Args:
        contacts: Provider contact parameters (``RegistrantFirstName``, ...)

    Returns:
        New dict with the auto-filled values
    """
    filled = dict(contacts)
    for role in AUTOFILL_ROLES:
        for field in AUTOFILL_FIELDS:
            target = role + field
            source = "Registrant" + field
            if is_empty(filled.get(target)) and not is_empty(filled.get(source)):
                filled[target] = filled[source]
    return filled
