"""Thread body component blocks.

Each block serializes to the Plain component input shape, e.g.
``{"componentText": {"text": "...", "textColor": "MUTED"}}``.
"""

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TextSize = Literal["S", "M", "L"]
TextColor = Literal["NORMAL", "MUTED", "SUCCESS", "WARNING", "DANGER"]
SpacerSize = Literal["XS", "S", "M", "L", "XL"]


class _Block(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ComponentText(_Block):
    text: str
    text_size: TextSize | None = Field(default=None, alias="textSize")
    text_color: TextColor | None = Field(default=None, alias="textColor")


class ComponentSpacer(_Block):
    spacer_size: SpacerSize = Field(alias="spacerSize")


class TextBlock(_Block):
    """Plain text, optionally sized and colored."""

    component_text: ComponentText = Field(alias="componentText")


class SpacerBlock(_Block):
    """Vertical spacing between blocks."""

    component_spacer: ComponentSpacer = Field(alias="componentSpacer")


class ComponentRow(_Block):
    row_main_content: tuple[TextBlock, ...] = Field(alias="rowMainContent")
    row_aside_content: tuple[TextBlock, ...] = Field(alias="rowAsideContent")


class RowBlock(_Block):
    """Two-column row: main content on the left, aside on the right."""

    component_row: ComponentRow = Field(alias="componentRow")


ContentBlock = TextBlock | SpacerBlock | RowBlock


def text(
    value: str,
    *,
    size: TextSize | None = None,
    color: TextColor | None = None,
) -> TextBlock:
    return TextBlock(
        component_text=ComponentText(text=value, text_size=size, text_color=color)
    )


def spacer(size: SpacerSize = "S") -> SpacerBlock:
    return SpacerBlock(component_spacer=ComponentSpacer(spacer_size=size))


def row(main: Sequence[TextBlock], aside: Sequence[TextBlock]) -> RowBlock:
    return RowBlock(
        component_row=ComponentRow(
            row_main_content=tuple(main),
            row_aside_content=tuple(aside),
        )
    )


def dump_components(blocks: Sequence[ContentBlock]) -> list[dict]:
    """Serialize blocks to the JSON shape the Plain API expects."""
    return [
        block.model_dump(mode="json", by_alias=True, exclude_none=True)
        for block in blocks
    ]
