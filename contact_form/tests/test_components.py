"""Tests for component blocks and their Plain wire shape."""

import pytest
from pydantic import ValidationError

from contact_form.models.components import (
    RowBlock,
    SpacerBlock,
    TextBlock,
    dump_components,
    row,
    spacer,
    text,
)
from contact_form.models.contact import PRIORITY_LOW, ContactFormRequest


def test_text_omits_unset_styling():
    assert dump_components([text("hi")]) == [{"componentText": {"text": "hi"}}]


def test_styled_text_and_spacer_and_row_shapes():
    blocks = [
        text("small", size="S", color="MUTED"),
        spacer("S"),
        row(main=[text("Current provider", color="MUTED")], aside=[text("Acme")]),
    ]

    assert dump_components(blocks) == [
        {"componentText": {"text": "small", "textSize": "S", "textColor": "MUTED"}},
        {"componentSpacer": {"spacerSize": "S"}},
        {
            "componentRow": {
                "rowMainContent": [
                    {"componentText": {"text": "Current provider", "textColor": "MUTED"}}
                ],
                "rowAsideContent": [{"componentText": {"text": "Acme"}}],
            }
        },
    ]


def test_blocks_are_immutable():
    block = text("hi")
    with pytest.raises(ValidationError):
        block.component_text.text = "changed"


def test_invalid_color_rejected():
    with pytest.raises(ValidationError):
        text("hi", color="PURPLE")


def test_request_body_parses_each_block_kind():
    body = {
        "name": "Ada",
        "email": "ada@x.com",
        "title": "Demo request",
        "components": [
            {"componentText": {"text": "Hello"}},
            {"componentSpacer": {"spacerSize": "S"}},
            {
                "componentRow": {
                    "rowMainContent": [{"componentText": {"text": "Expected volume"}}],
                    "rowAsideContent": [{"componentText": {"text": "Up to 500/month"}}],
                }
            },
        ],
        "labelTypeIds": ["lt_demo"],
        "priority": 2,
    }

    request = ContactFormRequest.model_validate(body)

    assert [type(b) for b in request.components] == [TextBlock, SpacerBlock, RowBlock]
    assert request.label_type_ids == ("lt_demo",)


@pytest.mark.parametrize("priority", [-1, 4])
def test_priority_outside_range_rejected(priority):
    with pytest.raises(ValidationError):
        ContactFormRequest(
            name="Ada", email="ada@x.com", title="Question", components=[], priority=priority
        )


def test_low_priority_is_accepted():
    request = ContactFormRequest(
        name="Ada", email="ada@x.com", title="Question", components=[], priority=PRIORITY_LOW
    )
    assert request.priority == 3


def test_request_cannot_be_changed_after_construction():
    request = ContactFormRequest(
        name="Ada",
        email="ada@x.com",
        title="Question",
        components=[text("hi")],
        label_type_ids=["lt_question"],
    )

    assert request.components == (text("hi"),)
    with pytest.raises(AttributeError):
        request.components.append(spacer())
    with pytest.raises(AttributeError):
        request.label_type_ids.append("lt_other")
    with pytest.raises(ValidationError):
        request.priority = 0
