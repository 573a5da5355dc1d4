"""Contact form controller: per-category field state and submission.

The controller keeps a value for every field of every category, so switching
category does not throw away what was typed elsewhere. Only the fields of the
selected category end up in the submitted request.

Usage:
    async with httpx.AsyncClient(base_url="http://localhost:8000") as http:
        form = ContactFormController(http, settings.label_type_ids())
        form.set_name("Grace Hopper")
        form.set_email("grace@example.com")
        form.set_category(Category.QUESTION)
        form.set_question("Do you support SSO?")
        outcome = await form.submit()
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import httpx

from contact_form.models.contact import (
    DEFAULT_DEMO_VOLUME,
    BugReport,
    Category,
    DemoRequest,
    FeatureSuggestion,
    FormInput,
    QuestionInput,
    SecurityReport,
)
from contact_form.services.browser import BrowserParser, parse_browser
from contact_form.services.request_builder import build_request

logger = logging.getLogger(__name__)

CONTACT_FORM_PATH = "/api/contact-form/"

SUCCESS_MESSAGE = "Success!"
ERROR_MESSAGE = "Oops"


class Notifier(Protocol):
    """Shows the outcome of a submission to the user."""

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingNotifier:
    """Notifier that writes outcomes to the log."""

    def success(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.error(message)


@dataclass
class FormState:
    category: Category | None = None
    name: str = ""
    email: str = ""

    # Bug report
    bug_description: str = ""
    bug_is_blocking: bool = False

    # Feature suggestion
    feature_request: str = ""

    # Demo request
    demo_current_provider: str = ""
    demo_expected_volume: str = DEFAULT_DEMO_VOLUME
    demo_message: str = ""

    # Question
    question: str = ""

    # Security report
    security_issue: str = ""

    def form_input(self) -> FormInput | None:
        """Project the state onto the selected category's fields."""
        match self.category:
            case Category.BUG:
                return BugReport(
                    description=self.bug_description, is_blocking=self.bug_is_blocking
                )
            case Category.DEMO:
                return DemoRequest(
                    current_provider=self.demo_current_provider,
                    expected_volume=self.demo_expected_volume,
                    message=self.demo_message,
                )
            case Category.FEATURE:
                return FeatureSuggestion(request=self.feature_request)
            case Category.QUESTION:
                return QuestionInput(question=self.question)
            case Category.SECURITY:
                return SecurityReport(issue=self.security_issue)
        return None


@dataclass
class SubmitOutcome:
    ok: bool
    error: str | None = None


def _response_error(response: httpx.Response) -> str:
    try:
        return response.json().get("error") or f"HTTP {response.status_code}"
    except (ValueError, AttributeError):
        return f"HTTP {response.status_code}"


class ContactFormController:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        label_type_ids: Mapping[Category, str | None],
        notifier: Notifier | None = None,
        *,
        page_url: str = "",
        user_agent: str = "",
        browser_parser: BrowserParser = parse_browser,
    ) -> None:
        self._http = http_client
        self._label_type_ids = label_type_ids
        self._notifier = notifier or LoggingNotifier()
        self._page_url = page_url
        self._user_agent = user_agent
        self._browser_parser = browser_parser
        self._processing = False
        self.state = FormState()

    @property
    def is_processing(self) -> bool:
        return self._processing

    @property
    def can_submit(self) -> bool:
        """False while a submission is in flight or no category is selected."""
        return not self._processing and self.state.category is not None

    # ── Setters ──────────────────────────────────────────────────

    def set_category(self, category: Category | str | None) -> None:
        self.state.category = Category(category) if category else None

    def set_name(self, value: str) -> None:
        self.state.name = value

    def set_email(self, value: str) -> None:
        self.state.email = value

    def set_bug_description(self, value: str) -> None:
        self.state.bug_description = value

    def set_bug_is_blocking(self, value: bool) -> None:
        self.state.bug_is_blocking = value

    def set_feature_request(self, value: str) -> None:
        self.state.feature_request = value

    def set_demo_current_provider(self, value: str) -> None:
        self.state.demo_current_provider = value

    def set_demo_expected_volume(self, value: str) -> None:
        self.state.demo_expected_volume = value

    def set_demo_message(self, value: str) -> None:
        self.state.demo_message = value

    def set_question(self, value: str) -> None:
        self.state.question = value

    def set_security_issue(self, value: str) -> None:
        self.state.security_issue = value

    def reset(self) -> None:
        """Clear every field and the category."""
        self.state = FormState()

    # ── Submission ───────────────────────────────────────────────

    async def submit(self) -> SubmitOutcome:
        """Send the form once.

        On success the form is cleared. On any failure the fields are kept
        so the user can retry. No retries are made here.

        Raises:
            InvalidFormStateError: if no category is selected.
        """
        self._processing = True
        try:
            request = build_request(
                name=self.state.name,
                email=self.state.email,
                form_input=self.state.form_input(),
                label_type_ids=self._label_type_ids,
                page_url=self._page_url,
                user_agent=self._user_agent,
                browser_parser=self._browser_parser,
            )
            try:
                response = await self._http.post(
                    CONTACT_FORM_PATH,
                    json=request.model_dump(mode="json", by_alias=True, exclude_none=True),
                )
            except httpx.HTTPError as e:
                logger.exception("Contact form submission failed")
                self._notifier.error(ERROR_MESSAGE)
                return SubmitOutcome(ok=False, error=str(e) or type(e).__name__)

            if response.is_success:
                self.reset()
                self._notifier.success(SUCCESS_MESSAGE)
                return SubmitOutcome(ok=True)

            error = _response_error(response)
            logger.warning(
                "Contact form submission rejected (%d): %s", response.status_code, error
            )
            self._notifier.error(ERROR_MESSAGE)
            return SubmitOutcome(ok=False, error=error)
        finally:
            self._processing = False
