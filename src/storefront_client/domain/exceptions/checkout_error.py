from storefront_client.domain.exceptions.storefront_error import StorefrontError


class CheckoutError(StorefrontError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
