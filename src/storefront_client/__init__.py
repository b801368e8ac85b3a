"""Client library for the storefront REST API: catalog, cart, checkout, content and back-office."""

__version__ = "0.1.0"
