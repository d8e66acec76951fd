# helperspec/core/result.py
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .values import to_dynamic

class ScopeKind(Enum):
    # where a helper result's value lives.
    DERIVED = "derived"   # freshly built, owned by the result
    CONTEXT = "context"   # borrowed from the render context

@dataclass(frozen=True)
class ScopedValue:
    value: Any
    kind: ScopeKind = ScopeKind.DERIVED

    @classmethod
    def derived(cls, value: Any) -> "ScopedValue":
        return cls(value, ScopeKind.DERIVED)

    @property
    def is_derived(self) -> bool:
        return self.kind is ScopeKind.DERIVED

def wrap_result(helper: str, result: Any) -> ScopedValue:
    """Converts a body's return value into a derived dynamic value."""
    return ScopedValue.derived(to_dynamic(result, helper))
