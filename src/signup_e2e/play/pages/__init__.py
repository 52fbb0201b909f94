"""Page Object Model classes for Playwright tests."""

from .base_page import BasePage
from .registration_page import RegistrationPage

__all__ = [
    "BasePage",
    "RegistrationPage",
]
