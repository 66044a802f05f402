"""
tablerepr: Truncated HTML, LaTeX, Markdown and text displays of tables.
"""

from pathlib import Path as _Path

from ._config import ColSpec, config_context, get_config, set_config
from ._grid import CellGrid
from ._html import repr_html
from ._latex import escape_latex, has_latex_specials, repr_latex
from ._markdown import repr_markdown
from ._patching import patch_display, unpatch_display
from ._render import TemplateBundle, render, render_grid
from ._text import repr_text
from ._truncate import ELLIPSES, ELLIPSIS_D, ELLIPSIS_H, ELLIPSIS_V, truncate

with open(_Path(__file__).parent / "VERSION.txt") as _fh:
    __version__ = _fh.read().strip()

__all__ = [
    "truncate",
    "repr_html",
    "repr_latex",
    "repr_markdown",
    "repr_text",
    "render",
    "render_grid",
    "TemplateBundle",
    "CellGrid",
    "ColSpec",
    "escape_latex",
    "has_latex_specials",
    "ELLIPSIS_H",
    "ELLIPSIS_V",
    "ELLIPSIS_D",
    "ELLIPSES",
    "get_config",
    "set_config",
    "config_context",
    "patch_display",
    "unpatch_display",
]
