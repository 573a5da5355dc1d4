"""Browser detection from User-Agent strings."""

from collections.abc import Callable
from typing import NamedTuple

from user_agents import parse

UNKNOWN = "unknown"


class BrowserInfo(NamedTuple):
    name: str
    version: str


BrowserParser = Callable[[str], BrowserInfo]


def parse_browser(user_agent: str) -> BrowserInfo:
    """Return browser name and version, using ``unknown`` for anything unrecognised."""
    browser = parse(user_agent or "").browser
    name = browser.family if browser.family and browser.family != "Other" else UNKNOWN
    version = browser.version_string or UNKNOWN
    return BrowserInfo(name=name, version=version)
