from storefront_client.domain.exceptions.api_error import (
    ApiConnectionError,
    ApiError,
    SessionExpiredError,
    describe_api_error,
    extract_error_message,
)
from storefront_client.domain.exceptions.authentication_required_error import AuthenticationRequiredError
from storefront_client.domain.exceptions.checkout_error import CheckoutError
from storefront_client.domain.exceptions.form_validation_error import FormValidationError
from storefront_client.domain.exceptions.storefront_error import StorefrontError

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "AuthenticationRequiredError",
    "CheckoutError",
    "FormValidationError",
    "SessionExpiredError",
    "StorefrontError",
    "describe_api_error",
    "extract_error_message",
]
