"""Idempotent insertion of ES module import lines."""

from __future__ import annotations

import re

# ``import <clause> from '<module>'`` starting a line or following a ``;`` on
# it; the clause may span lines (``import {\n  a,\n  b,\n} from 'x'``) but
# never contains a quote, so side-effect imports such as
# ``import './index.css'`` are not matched.
IMPORT_PATTERN = re.compile(
    r"""(?:^|(?<=;)[ \t]*)import\s+[\w*{}\s,$]+?\s*from\s+(['"])[^'"\n]+\1;?""",
    re.MULTILINE,
)


def ensure_import(text: str, import_line: str) -> str:
    """Return *text* with *import_line* present exactly once.

    The line is inserted right after the last ``import ... from '...'``
    statement, or prepended when the file has none.  A line that is already
    present leaves the text untouched.
    """
    line = import_line.strip()
    if line in text:
        return text

    last = None
    for last in IMPORT_PATTERN.finditer(text):
        pass

    if last is None:
        return f"{line}\n{text}"

    end = last.end()
    return f"{text[:end]}\n{line}{text[end:]}"
