from __future__ import annotations

from storefront_client.application.dtos.forms.base_form import BaseForm


class ContactForm(BaseForm):
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""

    def collect_errors(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not self.name.strip():
            errors["name"] = "Name is required"
        if "@" not in self.email:
            errors["email"] = "A valid email is required"
        if not self.message.strip():
            errors["message"] = "Message is required"
        return errors
