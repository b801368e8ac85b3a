from __future__ import annotations

from typing import Any, Optional

from storefront_client.application.dtos.forms.base_form import BaseForm
from storefront_client.domain.entities.user_session import User

MIN_PASSWORD_LENGTH = 6


class RegistrationForm(BaseForm):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    terms_accepted: bool = False
    marketing_opt_in: bool = False

    def collect_errors(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not self.first_name.strip():
            errors["first_name"] = "First name is required"
        if not self.last_name.strip():
            errors["last_name"] = "Last name is required"
        if not self.email.strip():
            errors["email"] = "Email is required"
        if not self.password:
            errors["password"] = "Password is required"
        elif len(self.password) < MIN_PASSWORD_LENGTH:
            errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        if not self.terms_accepted:
            errors["terms_accepted"] = "You must accept the terms and conditions"
        return errors


class ForgotPasswordForm(BaseForm):
    email: str = ""

    def collect_errors(self) -> dict[str, str]:
        if not self.email:
            return {"email": "Email is required"}
        return {}


class ResetPasswordForm(BaseForm):
    reset_token: str = ""
    new_password: str = ""
    confirm_password: str = ""

    def collect_errors(self) -> dict[str, str]:
        # One message at a time, in the order the screen checks them
        if not self.reset_token:
            return {"reset_token": "Reset token is required"}
        if not self.new_password:
            return {"new_password": "Password is required"}
        if len(self.new_password) < MIN_PASSWORD_LENGTH:
            return {"new_password": f"Password must be at least {MIN_PASSWORD_LENGTH} characters"}
        if self.new_password != self.confirm_password:
            return {"confirm_password": "Passwords do not match"}
        return {}


class ProfileForm(BaseForm):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    profile_picture: Optional[str] = None
    marketing_opt_in: bool = False

    @classmethod
    def from_user(cls, user: User) -> "ProfileForm":
        return cls(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email or "",
            phone=user.phone or "",
            profile_picture=user.profile_picture,
            marketing_opt_in=user.marketing_opt_in,
        )

    def collect_errors(self) -> dict[str, str]:
        if not self.first_name.strip() or not self.last_name.strip():
            return {"name": "First name and last name are required"}
        return {}

    def has_changes(self, user: Optional[User]) -> bool:
        if user is None:
            return True
        return (
            self.first_name.strip() != (user.first_name or "")
            or self.last_name.strip() != (user.last_name or "")
            or self.email != (user.email or "")
            or self.phone != (user.phone or "")
            or (self.profile_picture or None) != (user.profile_picture or None)
            or self.marketing_opt_in != (user.marketing_opt_in or False)
        )

    def to_update_kwargs(self) -> dict[str, Any]:
        return {
            "first_name": self.first_name.strip(),
            "last_name": self.last_name.strip(),
            "email": self.email or None,
            "phone": self.phone or None,
            "profile_picture": self.profile_picture or None,
            "marketing_opt_in": self.marketing_opt_in,
        }
