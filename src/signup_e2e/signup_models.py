"""
Data models for the signup page objects.

These are small immutable value types describing how form elements are
located. The page objects turn them into Playwright locators on demand.
"""
import enum
from dataclasses import dataclass
from typing import Optional


class LocatorStrategy(str, enum.Enum):
    ID = "id"
    NAME = "name"
    XPATH = "xpath"
    CSS = "css"


def _escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted CSS attribute selector."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


@dataclass(frozen=True)
class LocatorSpec:
    """
    A (strategy, selector) pair identifying a single DOM element.

    Declared once on a page object class and never recomputed.
    """
    strategy: LocatorStrategy
    selector: str

    def __post_init__(self):
        # Accept plain strings ("id", "xpath", ...) as well as the enum
        try:
            strategy = LocatorStrategy(self.strategy)
        except ValueError:
            raise ValueError(f"Unknown locator strategy: {self.strategy!r}")
        object.__setattr__(self, "strategy", strategy)

        if not self.selector:
            raise ValueError(f"Empty selector for {strategy.value} locator")

    def to_selector(self) -> str:
        """
        Render the Playwright selector string for this locator.

        Returns:
            Selector usable with ``page.locator()``
        """
        if self.strategy is LocatorStrategy.ID:
            return f'[id="{_escape_attribute(self.selector)}"]'
        if self.strategy is LocatorStrategy.NAME:
            return f'[name="{_escape_attribute(self.selector)}"]'
        if self.strategy is LocatorStrategy.XPATH:
            return f"xpath={self.selector}"
        return self.selector


@dataclass(frozen=True)
class FieldBinding:
    """
    Association between a semantic field name and its locator.

    config_key is set for fields whose value comes from the signup
    configuration (e.g. "firstName").
    """
    name: str
    locator: LocatorSpec
    config_key: Optional[str] = None
