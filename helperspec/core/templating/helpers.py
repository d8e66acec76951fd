# helperspec/core/templating/helpers.py
"""
Built-in Handlebars helpers, declared with the helper signature DSL.
"""
import datetime
import json as jsonlib
from typing import Any

from helperspec.core.helper import handlebars_helper
from helperspec.util import get_language_hint

def _as_number(val: Any) -> float | None:
    if isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        return float(val)
    if isinstance(val, str) and val.replace('.', '', 1).isdigit():
        return float(val)
    return None

@handlebars_helper("*values")
def add(values):
    """Sums numeric arguments and numeric strings. Ignores everything else."""
    return sum(n for n in (_as_number(v) for v in values) if n is not None)

@handlebars_helper("")
def now():
    """Current UTC timestamp in ISO 8601 format."""
    return datetime.datetime.now(datetime.timezone.utc).isoformat()

@handlebars_helper("ext: str")
def lang_hint(ext):
    return get_language_hint(ext)

@handlebars_helper("x: u64, {compare: u64 = 10}")
def is_above(x, compare):
    return x > compare

@handlebars_helper("value: Json, fallback: Json")
def default(value, fallback):
    return fallback if value is None or value == "" else value

@handlebars_helper("value: Json, {indent: u64 = 0}")
def json(value, indent):
    return jsonlib.dumps(value, indent=indent or None, sort_keys=True)

@handlebars_helper("items: array, {sep: str = \", \"}")
def join(items, sep):
    return sep.join(str(item) for item in items)

# Dictionary of helpers to be registered with TemplateRenderer
BUILTIN_HELPERS = {h.name: h for h in (add, now, lang_hint, is_above, default, json, join)}
