# helperspec/core/templating/__init__.py
"""
Templating module for helperspec.

Provides the TemplateRenderer that renders Handlebars templates with compiled
helpers, the built-in helper set and loading of helpers from user modules.
"""
from .renderer import TemplateRenderer
from .helpers import BUILTIN_HELPERS
from .helper_loader import load_helpers, load_all_helpers

__all__ = [
    "TemplateRenderer",
    "BUILTIN_HELPERS",
    "load_helpers",
    "load_all_helpers",
]
