"""Builders for predictably named HTML element trees."""
from __future__ import annotations

__version__ = "0.1.0"

from .dom import Element
from .ui.elements import create_div, create_fieldset, create_simple_list
from .ui.views.table import TableOptions, create_table

__all__ = [
    "Element",
    "TableOptions",
    "__version__",
    "create_div",
    "create_fieldset",
    "create_simple_list",
    "create_table",
]
