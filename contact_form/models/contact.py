"""Contact form data models."""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from contact_form.models.components import ContentBlock


class Category(str, Enum):
    """What the person filling in the form needs help with."""

    BUG = "bug"
    DEMO = "demo"
    FEATURE = "feature"
    QUESTION = "question"
    SECURITY = "security"


# Plain thread priorities
PRIORITY_URGENT = 0
PRIORITY_HIGH = 1
PRIORITY_NORMAL = 2
PRIORITY_LOW = 3


class Option(BaseModel):
    """A selectable (label, value) pair."""

    label: str
    value: str


CATEGORY_OPTIONS: list[Option] = [
    Option(label="Report a bug", value=Category.BUG.value),
    Option(label="Book a demo", value=Category.DEMO.value),
    Option(label="Suggest a feature", value=Category.FEATURE.value),
    Option(label="Report a security issue", value=Category.SECURITY.value),
    Option(label="Something else", value=Category.QUESTION.value),
]

DEMO_PROVIDER_OPTIONS: list[Option] = [
    Option(label="Acme", value="acme"),
    Option(label="Juniper", value="juniper"),
    Option(label="Resolve", value="resolve"),
    Option(label="Other", value="other"),
    Option(label="No, setting up for the first time", value="none"),
]

DEMO_VOLUME_OPTIONS: list[Option] = [
    Option(label="I'm not sure", value="no"),
    Option(label="Up to 500/month", value="<500"),
    Option(label="Up to 10,000/month", value="<10,000"),
    Option(label="Up to 50,000/month", value="<50,000"),
    Option(label="More than 50,000/month", value=">50,000"),
]

DEFAULT_DEMO_VOLUME = DEMO_VOLUME_OPTIONS[0].value


def option_label(options: list[Option], value: str) -> str:
    """Return the label for *value*, or an empty string if it isn't listed."""
    for option in options:
        if option.value == value:
            return option.label
    return ""


# ── Form input variants (one per category) ───────────────────────


class _FormInput(BaseModel):
    model_config = ConfigDict(frozen=True)


class BugReport(_FormInput):
    category: ClassVar[Category] = Category.BUG

    description: str = ""
    is_blocking: bool = False


class DemoRequest(_FormInput):
    category: ClassVar[Category] = Category.DEMO

    current_provider: str = ""  # value from DEMO_PROVIDER_OPTIONS
    expected_volume: str = DEFAULT_DEMO_VOLUME  # value from DEMO_VOLUME_OPTIONS
    message: str = ""


class FeatureSuggestion(_FormInput):
    category: ClassVar[Category] = Category.FEATURE

    request: str = ""


class QuestionInput(_FormInput):
    category: ClassVar[Category] = Category.QUESTION

    question: str = ""


class SecurityReport(_FormInput):
    category: ClassVar[Category] = Category.SECURITY

    issue: str = ""


FormInput = BugReport | DemoRequest | FeatureSuggestion | QuestionInput | SecurityReport


# ── Wire models ──────────────────────────────────────────────────


class ContactFormRequest(BaseModel):
    """Payload posted by the form to ``POST /api/contact-form/``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    email: str
    title: str
    components: tuple[ContentBlock, ...]
    label_type_ids: tuple[str, ...] = Field(default=(), alias="labelTypeIds")
    priority: int = Field(
        default=PRIORITY_NORMAL, ge=PRIORITY_URGENT, le=PRIORITY_LOW
    )


class ContactFormResponse(BaseModel):
    """Response from the contact form endpoint. ``error`` is None on success."""

    error: str | None = None


class FormOptions(BaseModel):
    """Select options a front end needs to render the form."""

    categories: list[Option]
    providers: list[Option]
    volumes: list[Option]
