# helperspec/core/invocation.py
from typing import Any, Dict, Mapping, Sequence, Tuple

import pybars  # type: ignore

from .values import MISSING

def _unwrap(value: Any) -> Any:
    # pybars hands `this` and some resolved paths over as Scope wrappers.
    return value.context if isinstance(value, pybars.Scope) else value

class HelperInvocation:
    """
    Read-only view of one helper call: positional params, hash params and the
    render context the helper was called from.
    """
    __slots__ = ("_params", "_hash", "context")

    def __init__(self, params: Sequence[Any] = (), hash: Mapping[str, Any] | None = None, context: Any = None):
        self._params: Tuple[Any, ...] = tuple(params)
        self._hash: Dict[str, Any] = dict(hash or {})
        self.context = context

    @classmethod
    def from_pybars(cls, this: Any, params: Sequence[Any], hash: Mapping[str, Any]) -> "HelperInvocation":
        return cls(
            [_unwrap(p) for p in params],
            {k: _unwrap(v) for k, v in hash.items()},
            context=_unwrap(this),
        )

    def positional_count(self) -> int:
        return len(self._params)

    def positional_at(self, index: int) -> Any:
        if 0 <= index < len(self._params):
            return self._params[index]
        return MISSING

    def named_lookup(self, key: str) -> Any:
        return self._hash.get(key, MISSING)

    def all_positional(self) -> Tuple[Any, ...]:
        return self._params

    def all_named(self) -> Mapping[str, Any]:
        return self._hash

    def __repr__(self) -> str:
        return f"HelperInvocation(params={list(self._params)!r}, hash={self._hash!r})"
