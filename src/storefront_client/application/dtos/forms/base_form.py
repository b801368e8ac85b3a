from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict

from storefront_client.domain.exceptions.form_validation_error import FormValidationError

FormT = TypeVar("FormT", bound="BaseForm")


class BaseForm(BaseModel):
    """
    Raw user input for one screen.
    Fields hold what the user typed; collect_errors() applies the screen's rules.
    """
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    def collect_errors(self) -> dict[str, str]:
        return {}

    def is_valid(self) -> bool:
        return not self.collect_errors()

    def ensure_valid(self: FormT) -> FormT:
        errors = self.collect_errors()
        if errors:
            raise FormValidationError(errors)
        return self
