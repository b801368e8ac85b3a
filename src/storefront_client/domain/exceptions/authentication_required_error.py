from storefront_client.domain.exceptions.storefront_error import StorefrontError


class AuthenticationRequiredError(StorefrontError):
    """Raised when an operation needs a logged-in user and there is none."""

    def __init__(self, message: str = "Please log in to continue"):
        super().__init__(message)
        self.message = message
