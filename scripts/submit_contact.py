"""Submit the contact form from the command line.

Usage:
    python -m scripts.submit_contact --name "Grace Hopper" --email grace@x.com \\
        --category bug --text "Crashes on save" --blocking
    python -m scripts.submit_contact --name Ada --email ada@x.com \\
        --category demo --provider acme --volume "<500" --text "Hello"
    python -m scripts.submit_contact ... --base-url http://localhost:8000
"""

import argparse
import asyncio
import logging
import sys

import httpx

from contact_form.client.form_controller import ContactFormController
from contact_form.config import get_settings
from contact_form.models.contact import (
    DEFAULT_DEMO_VOLUME,
    DEMO_PROVIDER_OPTIONS,
    DEMO_VOLUME_OPTIONS,
    Category,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Submit a contact form request")
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument(
        "--category", required=True, choices=[c.value for c in Category]
    )
    parser.add_argument(
        "--text",
        default="",
        help="Bug description, idea, question, security issue or demo message",
    )
    parser.add_argument(
        "--blocking", action="store_true", help="Bug is blocking (bug only)"
    )
    parser.add_argument(
        "--provider",
        default="",
        choices=["", *(o.value for o in DEMO_PROVIDER_OPTIONS)],
        help="Current provider (demo only)",
    )
    parser.add_argument(
        "--volume",
        default=DEFAULT_DEMO_VOLUME,
        choices=[o.value for o in DEMO_VOLUME_OPTIONS],
        help="Expected volume (demo only)",
    )
    return parser.parse_args(argv)


def _fill_form(form: ContactFormController, args: argparse.Namespace) -> None:
    form.set_name(args.name)
    form.set_email(args.email)
    form.set_category(args.category)

    category = Category(args.category)
    if category is Category.BUG:
        form.set_bug_description(args.text)
        form.set_bug_is_blocking(args.blocking)
    elif category is Category.DEMO:
        form.set_demo_current_provider(args.provider)
        form.set_demo_expected_volume(args.volume)
        form.set_demo_message(args.text)
    elif category is Category.FEATURE:
        form.set_feature_request(args.text)
    elif category is Category.QUESTION:
        form.set_question(args.text)
    else:
        form.set_security_issue(args.text)


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()

    async with httpx.AsyncClient(
        base_url=args.base_url, timeout=settings.plain_timeout_seconds
    ) as http:
        form = ContactFormController(
            http,
            settings.label_type_ids(),
            page_url=args.base_url,
            user_agent=f"python-httpx/{httpx.__version__}",
        )
        _fill_form(form, args)
        outcome = await form.submit()

    if outcome.ok:
        print("Submitted.")
        return 0
    print(f"Submission failed: {outcome.error}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
