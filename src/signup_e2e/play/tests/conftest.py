"""
Shared pytest fixtures for the signup page object tests.

Unit tests drive the page objects against a recording stand-in for the
Playwright Page so that no browser is launched. Live tests use the
``page`` fixture from pytest-playwright instead.
"""
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from signup_e2e.config import ConfigReader, SIGNUP_KEYS, env_var_name, get_app_config
from signup_e2e.play.pages.registration_page import RegistrationPage


SIGNUP_VALUES = {
    "baseUrl": "https://example.test",
    "password": "s3cret!Pass",
    "firstName": "Ada",
    "lastName": "Lovelace",
    "company": "Analytical Engines Ltd",
    "address": "12 St James's Square",
    "state": "Greater London",
    "city": "London",
    "zip": "SW1Y 4JH",
    "mobile": "+44 20 7946 0000",
    "birthDay": "10",
    "birthMonth": "12",
    "birthYear": "1815",
    "country": "United States",
}


class RecordingLocator:
    """Minimal stand-in for ``playwright.sync_api.Locator`` that records actions."""

    def __init__(self, page: "RecordingPage", selector: str) -> None:
        self.page = page
        self.selector = selector

    def _act(self, action: str, *args) -> None:
        self.page.calls.append((action, self.selector) + args)
        if self.selector in self.page.missing:
            raise PlaywrightTimeoutError(
                f"Timeout 30000ms exceeded.\nwaiting for locator(\"{self.selector}\")"
            )

    def click(self, **kwargs) -> None:
        self._act("click")

    def fill(self, value: str, **kwargs) -> None:
        self._act("fill", value)

    def select_option(self, value=None, **kwargs) -> List[str]:
        self._act("select_option", value)
        return [value]

    def get_attribute(self, name: str, **kwargs):
        self._act("get_attribute", name)
        return self.page.attributes.get((self.selector, name))

    def wait_for(self, state: str = "visible", timeout=None) -> None:
        self._act("wait_for", state)


class RecordingPage:
    """
    Minimal stand-in for ``playwright.sync_api.Page``.

    ``resolved`` lists every selector passed to ``locator()``; ``calls``
    lists every action in order. Selectors in ``missing`` behave like
    elements absent from the DOM: any action on them times out.
    """

    def __init__(self, missing: Iterable[str] = ()) -> None:
        self.calls: List[Tuple] = []
        self.resolved: List[str] = []
        self.missing = set(missing)
        self.attributes: Dict[Tuple[str, str], str] = {}

    def locator(self, selector: str) -> RecordingLocator:
        self.resolved.append(selector)
        return RecordingLocator(self, selector)

    def goto(self, url: str, **kwargs) -> None:
        self.calls.append(("goto", url))

    def screenshot(self, path: str, full_page: bool = False) -> bytes:
        self.calls.append(("screenshot", path))
        Path(path).write_bytes(b"")
        return b""

    def actions(self, action: str) -> List[Tuple]:
        return [call for call in self.calls if call[0] == action]


def selector_for(name: str) -> str:
    """Rendered selector of a RegistrationPage field."""
    return RegistrationPage.FIELDS_BY_NAME[name].locator.to_selector()


@pytest.fixture
def signup_values() -> Dict[str, str]:
    return dict(SIGNUP_VALUES)


@pytest.fixture
def config_reader(signup_values) -> ConfigReader:
    return ConfigReader(signup_values, source="test")


@pytest.fixture
def fake_page() -> RecordingPage:
    return RecordingPage()


@pytest.fixture
def registration(fake_page, config_reader, tmp_path) -> RegistrationPage:
    return RegistrationPage(fake_page, config_reader, screenshot_dir=str(tmp_path / "screenshots"))


@pytest.fixture
def clean_signup_env(monkeypatch):
    """Remove SIGNUP_* variables that would leak into configuration loading."""
    for key in SIGNUP_KEYS:
        monkeypatch.delenv(env_var_name(key), raising=False)
    monkeypatch.delenv("SIGNUP_CONFIG_PATH", raising=False)
    return monkeypatch


@pytest.fixture(scope="session")
def app_config() -> Dict:
    return get_app_config()


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args, app_config):
    """Apply SIGNUP_HEADLESS / SIGNUP_SLOW_MO to pytest-playwright's browser launch."""
    return {
        **browser_type_launch_args,
        "headless": app_config["headless"],
        "slow_mo": app_config["slow_mo"],
    }
