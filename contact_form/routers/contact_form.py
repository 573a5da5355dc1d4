"""Contact form submission endpoint."""

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from contact_form.models.contact import (
    CATEGORY_OPTIONS,
    DEMO_PROVIDER_OPTIONS,
    DEMO_VOLUME_OPTIONS,
    ContactFormRequest,
    ContactFormResponse,
    FormOptions,
)
from contact_form.services.plain import PlainClient
from contact_form.services.submission import submit_to_plain

router = APIRouter(prefix="/contact-form", tags=["contact-form"])


def get_plain_client(request: Request) -> PlainClient:
    """Plain client built once at startup (see ``main.lifespan``)."""
    return request.app.state.plain_client


async def parse_submission(request: Request) -> ContactFormRequest:
    """Validate the raw body as JSON whatever its Content-Type.

    Browsers posting with ``fetch`` and no headers send ``text/plain``.
    """
    body = await request.body()
    try:
        return ContactFormRequest.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False), body=body) from e


@router.post(
    "/",
    response_model=ContactFormResponse,
    responses={500: {"model": ContactFormResponse}},
)
async def submit_contact_form(
    submission: ContactFormRequest = Depends(parse_submission),
    plain: PlainClient = Depends(get_plain_client),
):
    """Upsert the customer and open a Plain thread for this submission."""
    result = await submit_to_plain(plain, submission)
    if result.error:
        return JSONResponse(
            status_code=500,
            content=ContactFormResponse(error=result.error.message).model_dump(),
        )
    return ContactFormResponse(error=None)


@router.get("/options", response_model=FormOptions)
async def form_options():
    """Select options for rendering the contact form."""
    return FormOptions(
        categories=CATEGORY_OPTIONS,
        providers=DEMO_PROVIDER_OPTIONS,
        volumes=DEMO_VOLUME_OPTIONS,
    )
