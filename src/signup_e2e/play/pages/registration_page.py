"""
Page Object Model for the storefront Signup / Registration form.
Encapsulates all locators and interactions for the signup workflow:
the "Signup / Login" panel and the full "Enter Account Information" form.
"""
from playwright.sync_api import Page, Locator
from typing import Dict, Tuple
import logging

from signup_e2e.config import ConfigReader
from signup_e2e.play.pages.base_page import BasePage
from signup_e2e.signup_models import FieldBinding, LocatorSpec, LocatorStrategy
from signup_e2e.utils import mask_value

logger = logging.getLogger(__name__)

ID = LocatorStrategy.ID
NAME = LocatorStrategy.NAME
XPATH = LocatorStrategy.XPATH


class RegistrationPage(BasePage):
    """Represents the signup panel and the account registration form."""

    FIELDS: Tuple[FieldBinding, ...] = (
        # Signup / Login panel
        FieldBinding("signup_menu", LocatorSpec(XPATH, "//ul[@class='nav navbar-nav']/li/a[text()=' Signup / Login']")),
        FieldBinding("name_input", LocatorSpec(NAME, "name")),
        FieldBinding("email_input", LocatorSpec(XPATH, "//input[@data-qa='signup-email']")),
        FieldBinding("signup_button", LocatorSpec(XPATH, "//button[@data-qa='signup-button']")),
        # Account information form
        FieldBinding("title_radio", LocatorSpec(ID, "id_gender1")),
        FieldBinding("password", LocatorSpec(ID, "password"), "password"),
        FieldBinding("birth_day", LocatorSpec(ID, "days"), "birthDay"),
        FieldBinding("birth_month", LocatorSpec(ID, "months"), "birthMonth"),
        FieldBinding("birth_year", LocatorSpec(ID, "years"), "birthYear"),
        FieldBinding("first_name", LocatorSpec(ID, "first_name"), "firstName"),
        FieldBinding("last_name", LocatorSpec(ID, "last_name"), "lastName"),
        FieldBinding("company", LocatorSpec(ID, "company"), "company"),
        FieldBinding("address", LocatorSpec(ID, "address1"), "address"),
        FieldBinding("country", LocatorSpec(ID, "country"), "country"),
        FieldBinding("state", LocatorSpec(ID, "state"), "state"),
        FieldBinding("city", LocatorSpec(ID, "city"), "city"),
        FieldBinding("zip_code", LocatorSpec(ID, "zipcode"), "zip"),
        FieldBinding("mobile_number", LocatorSpec(ID, "mobile_number"), "mobile"),
        FieldBinding("create_button", LocatorSpec(XPATH, "//button[@data-qa='create-account']")),
        # Outcome
        FieldBinding("confirmation_message", LocatorSpec(XPATH, "//h2[@class='title text-center']/b")),
        FieldBinding("error_message", LocatorSpec(XPATH, "//div[@class='signup-form']//p")),
    )

    # Text fields filled by fill_registration_form(), in order
    REGISTRATION_FORM_ORDER = (
        "password",
        "first_name",
        "last_name",
        "company",
        "address",
        "state",
        "city",
        "zip_code",
        "mobile_number",
    )

    BIRTH_DATE_ORDER = ("birth_day", "birth_month", "birth_year")

    # Values never written to the log in clear text
    MASKED_FIELDS = frozenset({"password"})

    FIELDS_BY_NAME: Dict[str, FieldBinding] = {binding.name: binding for binding in FIELDS}

    def __init__(self, page: Page, config: ConfigReader, screenshot_dir: str = "screenshots"):
        super().__init__(page, screenshot_dir=screenshot_dir)
        self.config = config

    def binding(self, name: str) -> FieldBinding:
        """Get the declared binding for a field name."""
        try:
            return self.FIELDS_BY_NAME[name]
        except KeyError:
            raise KeyError(f"No locator declared for field '{name}'") from None

    def locator(self, name: str) -> Locator:
        """
        Get the Playwright locator for a declared field.

        Locators are lazy: nothing is resolved against the DOM until an
        action is performed on the returned Locator.
        """
        return self.page.locator(self.binding(name).locator.to_selector())

    # Signup / Login panel

    @property
    def signup_menu(self) -> Locator:
        """Get the 'Signup / Login' navigation entry."""
        return self.locator("signup_menu")

    @property
    def name_input(self) -> Locator:
        """Get the signup name input."""
        return self.locator("name_input")

    @property
    def email_input(self) -> Locator:
        """Get the signup email input."""
        return self.locator("email_input")

    @property
    def signup_button(self) -> Locator:
        """Get the Signup button that opens the registration form."""
        return self.locator("signup_button")

    # Account information form

    @property
    def title_radio(self) -> Locator:
        """Get the 'Mr.' title radio button."""
        return self.locator("title_radio")

    @property
    def password_input(self) -> Locator:
        return self.locator("password")

    @property
    def country_select(self) -> Locator:
        return self.locator("country")

    @property
    def create_account_button(self) -> Locator:
        """Get the Create Account button."""
        return self.locator("create_button")

    def wait_for_signup_form_load(self) -> None:
        """Wait for the Signup / Login panel to be attached."""
        self.wait_for_element(self.signup_button, state="attached")

    def wait_for_registration_form_load(self) -> None:
        """Wait for the account information form to be attached."""
        self.wait_for_element(self.password_input, state="attached")
        self.wait_for_element(self.create_account_button, state="attached")

    def navigate_to_base(self) -> None:
        """Open the application at the configured base URL."""
        base_url = self.config.get_property("baseUrl")
        logger.info(f"Entering Url: {base_url}")
        self.page.goto(base_url)

    def open_signup_menu(self) -> None:
        """Click the 'Signup / Login' link in the navigation bar."""
        logger.info("Clicking the Signup/Login link")
        self.signup_menu.click()

    def set_name(self, value: str) -> None:
        """Fill in the signup name field."""
        logger.info(f"Entering username: {value}")
        self.name_input.fill(value)

    def set_email(self, value: str) -> None:
        """Fill in the signup email field."""
        logger.info(f"Entering email: {value}")
        self.email_input.fill(value)

    def submit_signup(self) -> None:
        """Click the Signup button to open the full registration form."""
        logger.info("Clicking the Signup button")
        self.signup_button.click()

    def select_gender_title(self) -> None:
        """Select the 'Mr.' title radio button."""
        logger.info(f"Selecting title: {self.title_radio.get_attribute('value')}")
        self.title_radio.click()

    def set_field(self, locator: Locator, value: str, masked: bool = False) -> None:
        """
        Fill a single input field.

        Args:
            locator: The input field locator
            value: Text to enter, passed through unchanged
            masked: If True, the value is masked in the log line
        """
        logged_value = mask_value(value) if masked else value
        logger.info(f"Filling field with value: {logged_value}")
        locator.fill(value)

    def fill_registration_form(self) -> None:
        """
        Fill the account information text fields from configuration.

        Fields are filled in REGISTRATION_FORM_ORDER. Each value is read
        right before its field is filled, so a missing key or a failing
        field stops the remaining fills.
        """
        logger.info("Starting to fill the form")
        for name in self.REGISTRATION_FORM_ORDER:
            binding = self.binding(name)
            value = self.config.get_property(binding.config_key)
            self.set_field(self.locator(name), value, masked=name in self.MASKED_FIELDS)
            logger.info(f"Filled {name.replace('_', ' ')} field")

    def select_from_dropdown(self, locator: Locator, value: str) -> None:
        """
        Select a dropdown option by its value attribute.

        Args:
            locator: The <select> element locator
            value: The option's value attribute
        """
        locator.select_option(value=value)
        logger.info(f"Selected dropdown value: {value}")

    def set_birth_date(self) -> None:
        """Select the birth day, month and year dropdowns, in that order."""
        for name in self.BIRTH_DATE_ORDER:
            value = self.config.get_property(self.binding(name).config_key)
            self.select_from_dropdown(self.locator(name), value)
        logger.info("Filled birthdate field")

    def select_country(self) -> None:
        """Select the configured country from the Country dropdown."""
        country = self.config.get_property(self.binding("country").config_key)
        self.country_select.select_option(value=country)
        logger.info(f"Filled country field: {country}")
        logger.info("Form filling completed")

    def submit_registration(self) -> None:
        """
        Click the Create Account button to submit the form.

        On failure a screenshot is captured and the error is re-raised.
        """
        try:
            self.create_account_button.click()
            logger.info("Clicked create account button")
        except Exception as e:
            logger.error(f"Error clicking create account button: {e}")
            try:
                self.take_screenshot("create_account_error")
            except Exception as screenshot_error:
                logger.error(f"Failed to take screenshot: {screenshot_error}")
            raise

    def get_confirmation_message(self) -> Locator:
        """Get the element holding the 'Account Created!' message."""
        return self.locator("confirmation_message")

    def get_error_message(self) -> Locator:
        """Get the element holding the signup error (e.g. email already exists)."""
        return self.locator("error_message")

    def is_confirmation_displayed(self, timeout: int = 5000) -> bool:
        """Check if the account confirmation message is visible."""
        return self.is_element_visible(self.get_confirmation_message, timeout=timeout)

    def is_error_displayed(self, timeout: int = 5000) -> bool:
        """Check if the signup error message is visible."""
        return self.is_element_visible(self.get_error_message, timeout=timeout)
