"""Build the contact form request from the selected category and its fields.

Everything here is a pure function of its arguments. The only outside input
is browser detection, which is injected so tests can supply a fixed result.
"""

from collections.abc import Mapping

from contact_form.models.components import ContentBlock, row, spacer, text
from contact_form.models.contact import (
    DEMO_PROVIDER_OPTIONS,
    DEMO_VOLUME_OPTIONS,
    PRIORITY_HIGH,
    PRIORITY_NORMAL,
    PRIORITY_URGENT,
    BugReport,
    Category,
    ContactFormRequest,
    DemoRequest,
    FeatureSuggestion,
    FormInput,
    QuestionInput,
    SecurityReport,
    option_label,
)
from contact_form.services.browser import BrowserParser, parse_browser

DEFAULT_TITLE = "Contact form"

TITLES: dict[Category, str] = {
    Category.BUG: "Bug report",
    Category.DEMO: "Demo request",
    Category.FEATURE: "Feature suggestion",
    Category.QUESTION: "Question",
    Category.SECURITY: "Security report",
}


class InvalidFormStateError(RuntimeError):
    """A request was built while no category was selected."""


# ── Components ───────────────────────────────────────────────────


def components_for_bug(
    description: str,
    page_url: str,
    user_agent: str,
    browser_parser: BrowserParser = parse_browser,
) -> list[ContentBlock]:
    browser = browser_parser(user_agent)
    return [
        text(description),
        spacer("S"),
        text(
            f"Reported on {page_url} using {browser.name} ({browser.version})",
            size="S",
            color="MUTED",
        ),
    ]


def components_for_feature_request(feature_request: str) -> list[ContentBlock]:
    return [text(feature_request)]


def components_for_question(question: str) -> list[ContentBlock]:
    return [text(question)]


def components_for_security_report(security_issue: str) -> list[ContentBlock]:
    return [text(security_issue)]


def components_for_demo_request(
    message: str, current_provider: str, expected_volume: str
) -> list[ContentBlock]:
    """Demo request body.

    ``current_provider`` and ``expected_volume`` are display labels, not the
    raw option values. The message and its spacer are only included when a
    message was written.
    """
    blocks: list[ContentBlock] = []
    if message:
        blocks.extend([text(message), spacer("S")])
    blocks.append(
        row(
            main=[text("Current provider", color="MUTED")],
            aside=[text(current_provider)],
        )
    )
    blocks.append(
        row(
            main=[text("Expected volume", color="MUTED")],
            aside=[text(expected_volume)],
        )
    )
    return blocks


def get_components(
    form_input: FormInput,
    page_url: str = "",
    user_agent: str = "",
    browser_parser: BrowserParser = parse_browser,
) -> list[ContentBlock]:
    """Dispatch to the component builder for the input's category."""
    match form_input:
        case BugReport():
            return components_for_bug(
                form_input.description, page_url, user_agent, browser_parser
            )
        case DemoRequest():
            return components_for_demo_request(
                form_input.message,
                option_label(DEMO_PROVIDER_OPTIONS, form_input.current_provider),
                option_label(DEMO_VOLUME_OPTIONS, form_input.expected_volume),
            )
        case FeatureSuggestion():
            return components_for_feature_request(form_input.request)
        case QuestionInput():
            return components_for_question(form_input.question)
        case SecurityReport():
            return components_for_security_report(form_input.issue)
    raise InvalidFormStateError(f"Unsupported form input: {form_input!r}")


# ── Title, priority, labels ──────────────────────────────────────


def get_title(category: Category | None) -> str:
    if category is None:
        return DEFAULT_TITLE
    return TITLES[category]


def get_priority(category: Category | None, bug_is_blocking: bool = False) -> int:
    # Security reports are always urgent
    if category is Category.SECURITY:
        return PRIORITY_URGENT
    # Blocking bugs are high priority
    if category is Category.BUG and bug_is_blocking:
        return PRIORITY_HIGH
    return PRIORITY_NORMAL


def get_label_type_ids(
    category: Category | None,
    label_type_ids: Mapping[Category, str | None],
) -> list[str]:
    """Return the configured label type id for *category*, if any."""
    if category is None:
        return []
    label_type_id = label_type_ids.get(category)
    return [label_type_id] if label_type_id else []


# ── Request ──────────────────────────────────────────────────────


def build_request(
    name: str,
    email: str,
    form_input: FormInput | None,
    label_type_ids: Mapping[Category, str | None],
    page_url: str = "",
    user_agent: str = "",
    browser_parser: BrowserParser = parse_browser,
) -> ContactFormRequest:
    """Build the full submission payload.

    Raises:
        InvalidFormStateError: if no category was selected. The form keeps
            its submit control disabled in that state, so reaching this is
            a programming error.
    """
    if form_input is None:
        raise InvalidFormStateError("form not set")

    category = form_input.category
    bug_is_blocking = isinstance(form_input, BugReport) and form_input.is_blocking
    return ContactFormRequest(
        name=name,
        email=email,
        title=get_title(category),
        components=get_components(form_input, page_url, user_agent, browser_parser),
        label_type_ids=get_label_type_ids(category, label_type_ids),
        priority=get_priority(category, bug_is_blocking),
    )
