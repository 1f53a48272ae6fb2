"""Read-transform-write injection into generated source files.

Every call re-reads the target file, inserts the import, re-locates the
anchor in the current text, wraps it and overwrites the file.  Nothing is
cached between calls, so successive wraps nest in call order: the latest
wrapper always encloses everything applied before it.

Calls against the same file must not run concurrently; the pipeline awaits
each step before starting the next.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from react_scaffolding.errors import AnchorNotFoundError
from react_scaffolding.injector.anchors import AnchorMatch, AnchorStyle, locate_anchor
from react_scaffolding.injector.imports import ensure_import
from react_scaffolding.injector.wrap import WrapDirective, apply_wrap
from react_scaffolding.utils import read_text, write_text


def render_anchor(style: AnchorStyle, wrapped: str, closes_block: bool = False) -> str:
    """Build the replacement for a matched anchor span."""
    if style is AnchorStyle.RENDER:
        return f".render(\n  {wrapped}\n)"
    replacement = f"return (\n  {wrapped}\n)"
    if closes_block:
        replacement += "\n}"
    return replacement


def inject(
    text: str,
    style: AnchorStyle | str,
    directive: WrapDirective,
    import_line: Optional[str] = None,
) -> str:
    """Apply one import + wrap to *text* and return the new text.

    Raises:
        AnchorNotFoundError: If the anchor cannot be located.
    """
    anchor_style = AnchorStyle(style)
    if import_line:
        text = ensure_import(text, import_line)

    anchor: AnchorMatch = locate_anchor(text, anchor_style)
    wrapped = apply_wrap(anchor.inner, directive)
    replacement = render_anchor(anchor_style, wrapped, anchor.closes_block)
    return text[: anchor.start] + replacement + text[anchor.end :]


class SourceInjector:
    """Applies imports and wraps to target files addressed by explicit path."""

    async def wrap(
        self,
        path: str | Path,
        style: AnchorStyle | str,
        component: str,
        import_line: Optional[str] = None,
        *,
        props: str = "",
        self_closing: bool = False,
        children: Optional[str] = None,
    ) -> str:
        """Wrap the anchor of *path* in ``<component>`` and rewrite the file.

        Returns:
            The new file content.

        Raises:
            AnchorNotFoundError: If no anchor pattern matches.  The file is
                left untouched.
            FilesystemError: If the file cannot be read or written.
        """
        target = Path(path)
        directive = WrapDirective(
            component=component,
            props=props,
            self_closing=self_closing,
            children=children,
        )
        content = await read_text(target)
        try:
            updated = inject(content, style, directive, import_line)
        except AnchorNotFoundError as exc:
            raise AnchorNotFoundError(exc.style, target) from None

        await write_text(target, updated)
        return updated

    async def add_import(self, path: str | Path, import_line: str) -> str:
        """Ensure *import_line* is present in *path* exactly once."""
        target = Path(path)
        content = await read_text(target)
        updated = ensure_import(content, import_line)
        if updated != content:
            await write_text(target, updated)
        return updated

    async def replace_in_file(
        self,
        path: str | Path,
        search: str | re.Pattern[str],
        replacement: str,
    ) -> bool:
        """Replace the first occurrence of *search* in *path*.

        *search* is either plain text or a compiled regex.  Returns ``True``
        when the file changed.
        """
        target = Path(path)
        content = await read_text(target)
        if isinstance(search, re.Pattern):
            updated = search.sub(lambda _: replacement, content, count=1)
        else:
            updated = content.replace(search, replacement, 1)

        if updated == content:
            return False
        await write_text(target, updated)
        return True


_default_injector = SourceInjector()


async def wrap_app_return(
    path: str | Path,
    component: str,
    import_line: Optional[str] = None,
    **options,
) -> str:
    """Wrap the returned JSX of the component in *path* (usually ``src/App.tsx``)."""
    return await _default_injector.wrap(
        path, AnchorStyle.RETURN, component, import_line, **options
    )


async def wrap_main_render(
    path: str | Path,
    component: str,
    import_line: Optional[str] = None,
    **options,
) -> str:
    """Wrap the JSX passed to ``createRoot(...).render()`` in *path* (usually ``src/main.tsx``)."""
    return await _default_injector.wrap(
        path, AnchorStyle.RENDER, component, import_line, **options
    )
