"""Submit a contact form request to Plain: upsert the customer, then open a thread."""

import logging
from dataclasses import dataclass
from pprint import pformat

from contact_form.middleware import request_id_var
from contact_form.models.contact import ContactFormRequest
from contact_form.services.plain import PlainClient, PlainError

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    """Outcome of a submission. ``error`` is set if either step failed."""

    error: PlainError | None = None
    customer_id: str | None = None
    thread_id: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _log_error(operation: str, error: PlainError) -> None:
    # Full structured error for operators; callers only see the message
    logger.error(
        "Plain %s failed (request %s):\n%s",
        operation,
        request_id_var.get() or "-",
        pformat(error.model_dump(), width=100),
    )


async def submit_to_plain(
    client: PlainClient, request: ContactFormRequest
) -> SubmissionResult:
    """Upsert the customer by email, then create a thread for them.

    Thread creation is never attempted if the upsert failed. A failed thread
    creation does not undo the upsert.
    """
    upserted = await client.upsert_customer(email=request.email, full_name=request.name)
    if upserted.error:
        _log_error("upsertCustomer", upserted.error)
        return SubmissionResult(error=upserted.error)

    customer = upserted.data
    logger.info("Customer upserted %s", customer.id)

    created = await client.create_thread(
        customer_id=customer.id,
        title=request.title,
        components=request.components,
        label_type_ids=request.label_type_ids,
        priority=request.priority,
    )
    if created.error:
        _log_error("createThread", created.error)
        return SubmissionResult(error=created.error, customer_id=customer.id)

    thread = created.data
    logger.info("Thread created %s", thread.id)
    return SubmissionResult(customer_id=customer.id, thread_id=thread.id)
