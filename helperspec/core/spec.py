# helperspec/core/spec.py
"""
Data model for a helper specification: the ordered positional parameters,
the named (hash) parameters with their defaults, the optional variadic
captures and the body callable.
"""
import inspect
import keyword
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from helperspec.exceptions import SpecError

from .params import ParamType
from .values import MISSING

@dataclass(frozen=True)
class PositionalParam:
    name: str
    type: ParamType

@dataclass(frozen=True)
class HashParam:
    name: str
    type: ParamType
    # evaluated once when the spec is built; never type checked.
    default: Any = MISSING

@dataclass(frozen=True)
class HelperSpec:
    name: str
    body: Callable[..., Any]
    positional: Tuple[PositionalParam, ...] = ()
    named: Tuple[HashParam, ...] = ()
    variadic_args_name: Optional[str] = None
    variadic_kwargs_name: Optional[str] = None
    signature: str = field(default="", compare=False)

    def bound_names(self) -> List[str]:
        """Every local name the body receives, in binding order."""
        names = [p.name for p in self.positional] + [h.name for h in self.named]
        if self.variadic_args_name: names.append(self.variadic_args_name)
        if self.variadic_kwargs_name: names.append(self.variadic_kwargs_name)
        return names

    def validate(self) -> "HelperSpec":
        """Checks structural invariants. Raises SpecError, returns self otherwise."""
        if not _is_identifier(self.name):
            raise SpecError(f"helper name {self.name!r} is not a valid identifier")

        for p in self.positional:
            if not isinstance(p.type, ParamType):
                raise SpecError(f"parameter {p.name} has no valid type", helper=self.name)
        for h in self.named:
            if not isinstance(h.type, ParamType):
                raise SpecError(f"hash {h.name} has no valid type", helper=self.name)
            if h.default is MISSING:
                raise SpecError(f"named parameter {h.name} must declare a default", helper=self.name)

        seen = set()
        for name in self.bound_names():
            if not _is_identifier(name):
                raise SpecError(f"parameter name {name!r} is not a valid identifier", helper=self.name)
            if name in seen:
                raise SpecError(f"duplicate parameter name {name}", helper=self.name)
            seen.add(name)

        if not callable(self.body):
            raise SpecError("body is not callable", helper=self.name)
        _check_body_accepts(self)
        return self

def _is_identifier(name: Any) -> bool:
    return isinstance(name, str) and name.isidentifier() and not keyword.iskeyword(name)

def _check_body_accepts(spec: HelperSpec) -> None:
    try:
        body_signature = inspect.signature(spec.body)
    except (TypeError, ValueError):
        return  # builtins and some C callables have no signature to check against
    try:
        body_signature.bind(**{name: None for name in spec.bound_names()})
    except TypeError as e:
        raise SpecError(f"body does not accept the declared parameters: {e}", helper=spec.name) from e
