"""Tests for User-Agent browser detection."""

from contact_form.services.browser import UNKNOWN, parse_browser

CHROME_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.6099.109 Safari/537.36"
)
FIREFOX_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0"
)


def test_parses_chrome():
    browser = parse_browser(CHROME_UA)
    assert browser.name == "Chrome"
    assert browser.version.startswith("120.0")


def test_parses_firefox():
    browser = parse_browser(FIREFOX_UA)
    assert browser.name == "Firefox"
    assert browser.version.startswith("121")


def test_empty_user_agent_is_unknown():
    assert parse_browser("") == (UNKNOWN, UNKNOWN)


def test_unrecognised_user_agent_is_unknown():
    assert parse_browser("????") == (UNKNOWN, UNKNOWN)
