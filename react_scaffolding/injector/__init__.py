"""Source injector -- splices imports and wrapper elements into generated files.

The injector works on plain text: it finds the expression a component
returns (``return ( ... )``) or the JSX handed to ``createRoot().render()``
with an ordered list of patterns, wraps it in a new element and writes the
file back.  Later wraps enclose earlier ones.

Quick usage::

    from react_scaffolding.injector import wrap_main_render

    await wrap_main_render(
        project / "src" / "main.tsx",
        "Provider",
        "import { Provider } from 'react-redux';",
        props="store={store}",
    )
"""

from .anchors import AnchorMatch, AnchorStyle, locate_anchor
from .imports import ensure_import
from .source import SourceInjector, inject, wrap_app_return, wrap_main_render
from .wrap import WrapDirective, apply_wrap

__all__ = [
    "AnchorMatch",
    "AnchorStyle",
    "SourceInjector",
    "WrapDirective",
    "apply_wrap",
    "ensure_import",
    "inject",
    "locate_anchor",
    "wrap_app_return",
    "wrap_main_render",
]
