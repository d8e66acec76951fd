# helperspec/core/variadic.py
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List

from .invocation import HelperInvocation
from .spec import HelperSpec

class SortedHashView(Mapping):
    """
    Read-only mapping over a call's hash arguments that always iterates in
    ascending lexicographic order of name, whatever order they were given in.
    Values are the invocation's own objects, not copies.
    """
    __slots__ = ("_hash", "_keys")

    def __init__(self, hash: Mapping[str, Any]):
        self._hash = hash
        self._keys = sorted(hash)

    def __getitem__(self, key: str) -> Any:
        return self._hash[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return "{" + ", ".join(f"{k!r}: {self._hash[k]!r}" for k in self._keys) + "}"

def collect_args(invocation: HelperInvocation) -> List[Any]:
    # all positional arguments, including those already bound by name.
    return list(invocation.all_positional())

def collect_kwargs(invocation: HelperInvocation) -> SortedHashView:
    return SortedHashView(invocation.all_named())

def collect_variadics(spec: HelperSpec, invocation: HelperInvocation) -> Dict[str, Any]:
    captures: Dict[str, Any] = {}
    if spec.variadic_args_name:
        captures[spec.variadic_args_name] = collect_args(invocation)
    if spec.variadic_kwargs_name:
        captures[spec.variadic_kwargs_name] = collect_kwargs(invocation)
    return captures
