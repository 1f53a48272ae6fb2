"""Wrapping an anchor expression in a new JSX element."""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field

_TRAILING_PUNCTUATION = re.compile(r"[,;\s]+$")


class WrapDirective(BaseModel):
    """A request to wrap the current anchor expression once."""

    component: str = Field(..., min_length=1, description="Wrapper element name, e.g. 'Provider'")
    props: str = Field(default="", description="Attribute string, e.g. 'store={store}'")
    self_closing: bool = Field(default=False)
    children: Optional[str] = Field(
        default=None, description="Content that replaces the wrapped expression entirely"
    )


def strip_trailing_punctuation(expression: str) -> str:
    """Drop trailing commas/semicolons left over from a call argument."""
    return _TRAILING_PUNCTUATION.sub("", expression.strip())


def apply_wrap(inner: str, directive: WrapDirective) -> str:
    """Wrap *inner* according to *directive*.

    ``children`` overrides the inner expression; ``self_closing`` without
    ``children`` produces ``<Component props />``.
    """
    props = f" {directive.props.strip()}" if directive.props.strip() else ""
    tag = directive.component

    if directive.children is not None:
        content = directive.children.strip()
    elif directive.self_closing:
        return f"<{tag}{props} />"
    else:
        content = strip_trailing_punctuation(inner)

    return f"<{tag}{props}>\n  {content}\n</{tag}>"
