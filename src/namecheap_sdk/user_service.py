"""
User service: namecheap.users.* commands.

Password reset, add-funds requests and reset-code password changes must
be sent without the UserName global; those calls pass ``user_name=None``
to the client for that request only.
"""

from typing import Any, Mapping, Optional

from .base_service import ApiService
from .contact_builder import ContactBuilder, normalize_input
from .enums import ServiceClass
from .models import NamecheapResponse
from .validation import missing_fields


USER_REQUIRED_FIELDS: tuple[str, ...] = (
    "firstName",
    "lastName",
    "address1",
    "city",
    "stateProvince",
    "postalCode",
    "country",
    "emailAddress",
    "phone",
)

NEW_USER_REQUIRED_FIELDS: tuple[str, ...] = ("newUserName", "newUserPassword", "acceptTerms")


class UserService(ApiService):
    """Account pricing, balances, profile and credentials."""

    COMMAND_PREFIX = "namecheap.users."

    def get_pricing(
        self,
        product_type: str = "DOMAIN",
        product_category: Optional[str] = None,
        promotion_code: Optional[str] = None,
        action_name: Optional[str] = None,
        product_name: Optional[str] = None,
    ) -> NamecheapResponse:
        """
        Get pricing for a product type.

        Args:
            product_type: DOMAIN, SSLCERTIFICATE or WHOISGUARD
            product_category: Category within the product type
            promotion_code: Coupon code
            action_name: REGISTER, RENEW, REACTIVATE, TRANSFER or PURCHASE
            product_name: Product within the type, e.g. a TLD
        """
        return self._client.get(self.command("getPricing"), {
            "ProductType": product_type,
            "ProductCategory": product_category,
            "PromotionCode": promotion_code,
            "ActionName": action_name,
            "ProductName": product_name,
        })

    def get_balances(self) -> NamecheapResponse:
        return self._client.get(self.command("getBalances"))

    def change_password(
        self,
        old_password_or_reset_code: str,
        new_password: str,
        reset_password: bool = False,
    ) -> NamecheapResponse:
        """
        Change the account password.

        With ``reset_password`` the first argument is a reset code and the
        call is made without UserName.
        """
        if reset_password:
            return self._client.get(
                self.command("changePassword"),
                {"ResetCode": old_password_or_reset_code, "NewPassword": new_password},
                user_name=None,
            )
        return self._client.get(self.command("changePassword"), {
            "OldPassword": old_password_or_reset_code,
            "NewPassword": new_password,
        })

    def update(self, user_info: Mapping[str, Any]) -> NamecheapResponse:
        """
        Update the account profile.

        Args:
            user_info: firstName, lastName, address1, city, stateProvince,
                zip (or postalCode), country, emailAddress, phone (required);
                jobTitle, organization, address2, phoneExt, fax (optional).
                Phone and fax use the +NNN.NNNNNNNNNN format.
        """
        missing = missing_fields(normalize_input(user_info), USER_REQUIRED_FIELDS)
        if missing:
            return self._missing_fields_response(missing, "update")

        data = ContactBuilder(ServiceClass.USER).build(user_info)
        return self._client.get(self.command("update"), data)

    def create_add_funds_request(
        self,
        username: str,
        payment_type: str,
        amount: float,
        return_url: str,
    ) -> NamecheapResponse:
        """
        Start a credit card top-up.

        The response carries TokenId, ReturnURL and RedirectURL; send the
        customer to RedirectURL and poll get_add_funds_status(TokenId).
        """
        return self._client.get(
            self.command("createaddfundsrequest"),
            {
                "Username": username,
                "PaymentType": payment_type,
                "Amount": amount,
                "ReturnUrl": return_url,
            },
            user_name=None,
        )

    def get_add_funds_status(self, token_id: str) -> NamecheapResponse:
        return self._client.get(self.command("getAddFundsStatus"), {"TokenId": token_id})

    def create(self, user_info: Mapping[str, Any]) -> NamecheapResponse:
        """
        Create a sub-account under the API user.

        Args:
            user_info: Profile fields as for update() plus newUserName,
                newUserPassword and acceptTerms (required) and
                ignoreDuplicateEmailAddress, acceptNews (optional)
        """
        missing = missing_fields(normalize_input(user_info), USER_REQUIRED_FIELDS)
        missing += missing_fields(user_info, NEW_USER_REQUIRED_FIELDS)
        if missing:
            return self._missing_fields_response(missing, "create")

        data = ContactBuilder(ServiceClass.USER).build(user_info)
        data.update({
            "NewUserName": user_info.get("newUserName"),
            "NewUserPassword": user_info.get("newUserPassword"),
            "AcceptTerms": user_info.get("acceptTerms"),
            "IgnoreDuplicateEmailAddress": user_info.get("ignoreDuplicateEmailAddress"),
            "AcceptNews": user_info.get("acceptNews"),
        })
        return self._client.get(self.command("create"), data)

    def login(self, password: str) -> NamecheapResponse:
        """Validate the password of an account created through the API."""
        return self._client.get(self.command("login"), {"Password": password})

    def reset_password(
        self,
        find_by_value: str,
        find_by: str = "EMAILADDRESS",
        email_from_name: Optional[str] = None,
        email_from: Optional[str] = None,
        url_pattern: Optional[str] = None,
    ) -> NamecheapResponse:
        """
        Email a password reset link to the account owner.

        Args:
            find_by_value: Username, email address or domain of the user
            find_by: EMAILADDRESS, DOMAINNAME or USERNAME
            email_from_name: Sender name override
            email_from: Sender address override
            url_pattern: Reset link pattern containing [RESETCODE]
        """
        return self._client.get(
            self.command("resetPassword"),
            {
                "FindBy": find_by,
                "FindByValue": find_by_value,
                "EmailFromName": email_from_name,
                "EmailFrom": email_from,
                "URLPattern": url_pattern,
            },
            user_name=None,
        )
