# helperspec/core/__init__.py
"""
Helper compilation core for helperspec.

This package turns a terse helper signature into a callable that follows the
pybars helper contract: it binds positional and hash arguments, exposes the
variadic captures and wraps the result as a derived JSON value.
"""
from .helper import CompiledHelper, compile_helper, handlebars_helper
from .invocation import HelperInvocation
from .params import ParamType
from .parser import parse_signature
from .result import ScopedValue, ScopeKind
from .spec import HashParam, HelperSpec, PositionalParam
from .values import MISSING

__all__ = [
    "CompiledHelper",
    "compile_helper",
    "handlebars_helper",
    "HelperInvocation",
    "ParamType",
    "parse_signature",
    "ScopedValue",
    "ScopeKind",
    "HelperSpec",
    "PositionalParam",
    "HashParam",
    "MISSING",
]
