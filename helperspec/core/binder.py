# helperspec/core/binder.py
"""
Binds the arguments of one helper call to the parameters its spec declares.

Positional parameters are bound first, in declaration order, then named
parameters. The first failure aborts the call. Extra positional arguments are
not checked here; they are only reachable through an ``*args`` capture.
"""
import copy
from typing import Any, Dict

from helperspec.diagnostics import get_logger
from helperspec.exceptions import HashTypeMismatch, MissingParameter, TypeMismatch

from .invocation import HelperInvocation
from .spec import HelperSpec
from .values import MISSING

log = get_logger(__name__)

def bind_positional(spec: HelperSpec, invocation: HelperInvocation) -> Dict[str, Any]:
    bindings: Dict[str, Any] = {}
    for index, param in enumerate(spec.positional):
        raw = invocation.positional_at(index)
        if raw is MISSING:
            raise MissingParameter(spec.name, param.name, index)
        value = param.type.coerce(raw)
        if value is MISSING:
            raise TypeMismatch(spec.name, param.name, param.type.value, raw, invocation.all_positional())
        bindings[param.name] = value
    extra = invocation.positional_count() - len(spec.positional)
    if extra > 0 and not spec.variadic_args_name:
        log.debug("extra_positional_arguments_ignored", helper=spec.name, extra=extra)
    return bindings

def bind_named(spec: HelperSpec, invocation: HelperInvocation) -> Dict[str, Any]:
    bindings: Dict[str, Any] = {}
    for param in spec.named:
        raw = invocation.named_lookup(param.name)
        if raw is MISSING:
            # each call gets its own copy of a container default
            bindings[param.name] = copy.deepcopy(param.default) if isinstance(param.default, (list, dict)) else param.default
            continue
        value = param.type.coerce(raw)
        if value is MISSING:
            raise HashTypeMismatch(spec.name, param.name, param.type.value, raw, invocation.all_named())
        bindings[param.name] = value
    return bindings

def bind_arguments(spec: HelperSpec, invocation: HelperInvocation) -> Dict[str, Any]:
    """Returns the declared parameter bindings, raising the first HelperError hit."""
    bindings = bind_positional(spec, invocation)
    bindings.update(bind_named(spec, invocation))
    # only constant-time values here; the silent logger still evaluates arguments
    log.debug("helper_arguments_bound", helper=spec.name,
              param_count=invocation.positional_count(), bound=len(bindings))
    return bindings
