# helperspec/core/values.py
"""
Accessors over the dynamic value model used by Handlebars templates.

Template data is plain JSON-shaped Python: None, bool, int, float, str,
list and dict. Each ``as_*`` accessor returns the value viewed as the
requested kind, or the ``MISSING`` sentinel when the value has another
shape. ``MISSING`` rather than ``None`` marks absence because ``as_null``
has to be able to return a present ``None``.
"""
import math
from collections.abc import Mapping
from typing import Any

import pybars  # type: ignore

from helperspec.exceptions import ResultConversionError

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1
U64_MAX = 2 ** 64 - 1


class _Missing:
    """Sentinel for an absent value."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def _is_integer(value: Any) -> bool:
    # bool is an int subclass in python but a distinct json kind.
    return isinstance(value, int) and not isinstance(value, bool)


def as_object(value: Any) -> Any:
    return value if isinstance(value, Mapping) else MISSING

def as_array(value: Any) -> Any:
    return value if isinstance(value, (list, tuple)) else MISSING

def as_str(value: Any) -> Any:
    return value if isinstance(value, str) else MISSING

def as_i64(value: Any) -> Any:
    if _is_integer(value) and I64_MIN <= value <= I64_MAX:
        return value
    return MISSING

def as_u64(value: Any) -> Any:
    if _is_integer(value) and 0 <= value <= U64_MAX:
        return value
    return MISSING

def as_f64(value: Any) -> Any:
    # integers widen to float, as json numbers do.
    if isinstance(value, float):
        return value
    if _is_integer(value):
        return float(value)
    return MISSING

def as_bool(value: Any) -> Any:
    return value if isinstance(value, bool) else MISSING

def as_null(value: Any) -> Any:
    return None if value is None else MISSING

def as_json(value: Any) -> Any:
    return value


def kind_of(value: Any) -> str:
    """Names the dynamic kind of a value, for log events."""
    if value is None: return "null"
    if isinstance(value, bool): return "boolean"
    if _is_integer(value): return "integer" if value < 0 else "unsigned-integer"
    if isinstance(value, float): return "float"
    if isinstance(value, str): return "string"
    if isinstance(value, (list, tuple)): return "array"
    if isinstance(value, Mapping): return "object"
    return type(value).__name__


def to_dynamic(value: Any, helper: str = "<anonymous>") -> Any:
    """
    Converts a native Python value into the dynamic value model.

    Containers are always rebuilt, so the result never shares a list or dict
    with the arguments the helper was called with.
    """
    if value is None or isinstance(value, (bool, str)):
        return value
    if _is_integer(value):
        if not I64_MIN <= value <= U64_MAX:
            raise ResultConversionError(helper, value, "integer out of 64-bit range")
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, pybars.strlist):
        return "".join(value)
    if isinstance(value, (list, tuple)):
        return [to_dynamic(item, helper) for item in value]
    if isinstance(value, Mapping):
        converted = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ResultConversionError(helper, value, f"object key {key!r} is not a string")
            converted[key] = to_dynamic(item, helper)
        return converted
    raise ResultConversionError(helper, value, f"unsupported type {type(value).__name__}")
