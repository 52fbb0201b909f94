"""Page objects and test support for the storefront signup workflow."""

__version__ = "0.1.0"
