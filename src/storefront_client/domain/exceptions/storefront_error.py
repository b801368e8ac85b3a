class StorefrontError(Exception):
    """
    Base class for all storefront client exceptions.
    Callers can catch this to handle any failure raised by the library.
    """

    pass
