# helperspec/core/helper.py
"""
Compiles a HelperSpec into a callable Handlebars helper.

A CompiledHelper binds the call's arguments (binder), exposes the variadic
captures (variadic), runs the body with everything as keyword arguments and
wraps the return value as a derived dynamic value (result). It can be put
straight into the ``helpers`` mapping pybars takes at render time.
"""
from dataclasses import dataclass
from typing import Any, Callable, Optional

from helperspec.diagnostics import get_logger
from helperspec.exceptions import SpecError

from .binder import bind_arguments
from .invocation import HelperInvocation
from .parser import parse_signature
from .result import ScopedValue, wrap_result
from .spec import HelperSpec
from .variadic import collect_variadics

log = get_logger(__name__)

@dataclass(frozen=True)
class CompiledHelper:
    spec: HelperSpec

    @property
    def name(self) -> str:
        return self.spec.name

    def invoke(self, invocation: HelperInvocation) -> ScopedValue:
        """Runs one call. Raises a HelperError subclass if the arguments don't bind."""
        bindings = bind_arguments(self.spec, invocation)
        bindings.update(collect_variadics(self.spec, invocation))
        result = self.spec.body(**bindings)
        log.debug("helper_invoked", helper=self.spec.name)
        return wrap_result(self.spec.name, result)

    def __call__(self, this: Any, /, *params: Any, **hash: Any) -> Any:
        # pybars calling convention: helper(this, *params, **hash)
        return self.invoke(HelperInvocation.from_pybars(this, params, hash)).value

    def __repr__(self) -> str:
        return f"<CompiledHelper {self.spec.name}|{self.spec.signature}|>"


def compile_helper(spec_or_name: HelperSpec | str, signature: Optional[str] = None,
                   body: Optional[Callable[..., Any]] = None) -> CompiledHelper:
    """
    Builds a CompiledHelper either from a ready HelperSpec or from a name, a
    terse signature string and a body callable. Raises SpecError when the
    specification is malformed; no helper is produced in that case.
    """
    if isinstance(spec_or_name, HelperSpec):
        if signature is not None or body is not None:
            raise SpecError("pass either a HelperSpec or a name, signature and body", helper=spec_or_name.name)
        spec = spec_or_name.validate()
    else:
        if body is None:
            raise SpecError("a body callable is required", helper=spec_or_name)
        spec = parse_signature(spec_or_name, signature or "", body)
    return CompiledHelper(spec)


def handlebars_helper(signature: str = "", name: Optional[str] = None) -> Callable[[Callable[..., Any]], CompiledHelper]:
    """
    Decorator form of compile_helper. The decorated function is the body and
    its name is the helper name unless ``name`` is given::

        @handlebars_helper("x: u64, {compare: u64 = 10}")
        def is_above(x, compare):
            return x > compare
    """
    def decorate(body: Callable[..., Any]) -> CompiledHelper:
        return compile_helper(name or body.__name__, signature, body)
    return decorate
