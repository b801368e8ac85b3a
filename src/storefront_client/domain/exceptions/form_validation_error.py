from __future__ import annotations

from storefront_client.domain.exceptions.storefront_error import StorefrontError


class FormValidationError(StorefrontError):
    """
    Raised when user input fails client-side validation.
    - field_errors: maps the form field name to the message shown next to it.
    """

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = dict(field_errors)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        # First error wins, matching single-line error banners
        return next(iter(self.field_errors.values()), "Invalid input")
