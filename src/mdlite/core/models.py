"""Document model produced by the parser: blocks and inline runs"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Text(_Frozen):
    """A plain span of paragraph text."""
    kind: Literal["text"] = "text"
    value: str


class Bold(_Frozen):
    """An emphasized span of paragraph text, markers removed."""
    kind: Literal["bold"] = "bold"
    value: str


InlineRun = Annotated[Union[Text, Bold], Field(discriminator="kind")]


class Heading(_Frozen):
    """'#'/'##' lines give level 2; '###' and whole-line '**...**' give level 3."""
    kind: Literal["heading"] = "heading"
    level: Literal[2, 3]
    text: str


class Paragraph(_Frozen):
    """One source line of prose as alternating plain/bold runs."""
    kind: Literal["paragraph"] = "paragraph"
    runs: tuple[InlineRun, ...] = Field(..., min_length=1)

    @property
    def text(self) -> str:
        return "".join(r.value for r in self.runs)


class ListBlock(_Frozen):
    """A maximal run of same-kind list items; items keep their raw text."""
    kind: Literal["list"] = "list"
    ordered: bool
    items: tuple[str, ...] = Field(..., min_length=1)


Block = Annotated[Union[Heading, Paragraph, ListBlock], Field(discriminator="kind")]


class Document(_Frozen):
    """Ordered, immutable result of a single parse."""
    blocks: tuple[Block, ...] = ()

    def __len__(self) -> int:
        return len(self.blocks)
