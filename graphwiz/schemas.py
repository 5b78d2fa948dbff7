from pydantic import BaseModel, Field
from typing import Literal

from graphwiz.config import GRAPHWIZ_INDENT


class RenderOptions(BaseModel):
    """How a finished graph is written out as DOT."""
    keyword: Literal["graph", "digraph"] = "digraph"
    arrow: Literal["--", "->"] = "->"
    strict: bool = False
    indent: int = Field(default=GRAPHWIZ_INDENT, ge=0)  # spaces per nesting level

    model_config = {"frozen": True, "validate_default": True}

    @property
    def header(self) -> str:
        prefix = "strict " if self.strict else ""
        return f"{prefix}{self.keyword} {{"


GRAPH = RenderOptions(keyword="graph", arrow="--")
DIGRAPH = RenderOptions(keyword="digraph", arrow="->")
STRICT_GRAPH = RenderOptions(keyword="graph", arrow="--", strict=True)
STRICT_DIGRAPH = RenderOptions(keyword="digraph", arrow="->", strict=True)
