"""Locating the expression a component returns or a root renders.

Each anchor style owns an ordered list of patterns, from the most specific
to the most permissive.  Repeated wraps shift whitespace and the position of
the closing brace, so the locator walks the list and uses the first pattern
that matches the current text.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field

from react_scaffolding.errors import AnchorNotFoundError


class AnchorStyle(str, Enum):
    """Shape of the anchor expression inside a target file."""

    RETURN = "return"
    RENDER = "render"


class AnchorPattern(BaseModel):
    """One entry of an ordered pattern list."""

    name: str
    regex: re.Pattern
    closes_block: bool = Field(
        default=False, description="Whether the match swallows the enclosing '}'"
    )


class AnchorMatch(BaseModel):
    """A located anchor expression."""

    style: AnchorStyle
    start: int = Field(..., ge=0, description="Offset of the matched span")
    end: int = Field(..., ge=0, description="End offset (exclusive) of the matched span")
    span: str = Field(..., description="Full matched text, replaced on rewrite")
    inner: str = Field(..., description="Trimmed anchor expression")
    closes_block: bool = False
    pattern: str = Field(..., description="Name of the pattern that matched")


RETURN_PATTERNS: tuple[AnchorPattern, ...] = (
    AnchorPattern(
        name="return-with-closing-brace",
        regex=re.compile(r"return\s*\(\s*([\s\S]*?)\s*\)\s*\n\s*}"),
        closes_block=True,
    ),
    AnchorPattern(
        name="return-parens",
        regex=re.compile(r"return\s*\(\s*([\s\S]*?)\s*\)"),
    ),
    AnchorPattern(
        name="return-simple-parens",
        regex=re.compile(r"return\s*\(([^)]*)\)"),
    ),
)

RENDER_PATTERNS: tuple[AnchorPattern, ...] = (
    # render() as the final statement: parentheses inside the JSX are fine,
    # but the argument may not run past the end of a statement (``);`` or a
    # ``)`` followed by a new unindented line).
    AnchorPattern(
        name="render-final-statement",
        regex=re.compile(
            r"\.render\s*\(\s*((?:(?!\)\s*;|\)[ \t]*\n\S)[\s\S])*?)\s*\)(?=\s*;?\s*\Z)"
        ),
    ),
    AnchorPattern(
        name="render-call",
        regex=re.compile(r"\.render\s*\(\s*([\s\S]*?)\s*\)"),
    ),
)

PATTERNS: dict[AnchorStyle, tuple[AnchorPattern, ...]] = {
    AnchorStyle.RETURN: RETURN_PATTERNS,
    AnchorStyle.RENDER: RENDER_PATTERNS,
}


def locate_anchor(text: str, style: AnchorStyle | str) -> AnchorMatch:
    """Find the anchor expression of *style* in *text*.

    Raises:
        AnchorNotFoundError: If none of the style's patterns match.
    """
    anchor_style = AnchorStyle(style)
    for pattern in PATTERNS[anchor_style]:
        match = pattern.regex.search(text)
        if match is None:
            continue
        return AnchorMatch(
            style=anchor_style,
            start=match.start(),
            end=match.end(),
            span=match.group(0),
            inner=match.group(1).strip(),
            closes_block=pattern.closes_block,
            pattern=pattern.name,
        )
    raise AnchorNotFoundError(anchor_style.value)
