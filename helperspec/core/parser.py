# helperspec/core/parser.py
"""
Parses the terse helper signature into a HelperSpec.

The signature lists positional parameters first, then an optional block of
named parameters in braces (each with a JSON literal default), then an
optional ``*args`` capture and an optional ``**kwargs`` capture::

    x: u64, y: str, {compare: u64 = 10, label: str = "n/a"}, *args, **kwargs
"""
import json
import re
from typing import Any, Callable, List, Optional, Tuple

import structlog

from helperspec.exceptions import SpecError

from .params import ParamType
from .spec import HashParam, HelperSpec, PositionalParam

log = structlog.get_logger(__name__)

_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
def _reject_constant(name: str):
    raise ValueError(f"{name} is not a JSON value")

_JSON_DECODER = json.JSONDecoder(parse_constant=_reject_constant)

# stages enforce the order positional -> {hash} -> *args -> **kwargs
_POSITIONAL, _HASH, _ARGS, _KWARGS = range(4)


class _SignatureParser:
    def __init__(self, text: str, helper: str):
        self.text = text
        self.helper = helper
        self.pos = 0
        self.positional: List[PositionalParam] = []
        self.named: List[HashParam] = []
        self.args_name: Optional[str] = None
        self.kwargs_name: Optional[str] = None

    def fail(self, message: str) -> SpecError:
        return SpecError(message, helper=self.helper, column=self.pos + 1)

    def skip_ws(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def at_end(self) -> bool:
        self.skip_ws()
        return self.pos >= len(self.text)

    def peek(self, token: str) -> bool:
        self.skip_ws()
        return self.text.startswith(token, self.pos)

    def expect(self, token: str):
        if not self.peek(token):
            found = self.text[self.pos:self.pos + 1] or "end of signature"
            raise self.fail(f"expected '{token}', found '{found}'")
        self.pos += len(token)

    def name(self, what: str) -> str:
        self.skip_ws()
        match = _NAME_RE.match(self.text, self.pos)
        if not match:
            raise self.fail(f"expected {what}")
        self.pos = match.end()
        return match.group(0)

    def param_type(self, param_name: str) -> ParamType:
        start = self.pos
        tag = self.name(f"a type for {param_name}")
        param_type = ParamType.from_string(tag)
        if param_type is None:
            self.pos = start
            self.skip_ws()
            known = ", ".join(t.value for t in ParamType)
            raise self.fail(f"unknown type `{tag}` for {param_name} (expected one of: {known})")
        return param_type

    def literal(self, hash_name: str) -> Any:
        self.skip_ws()
        try:
            value, end = _JSON_DECODER.raw_decode(self.text, self.pos)
        except ValueError as e:
            # JSONDecodeError is a ValueError; NaN and Infinity surface as plain ValueError
            reason = e.msg if isinstance(e, json.JSONDecodeError) else str(e)
            raise self.fail(f"invalid default literal for {hash_name}: {reason}") from e
        self.pos = end
        return value

    def parse(self) -> "_SignatureParser":
        stage = _POSITIONAL
        while not self.at_end():
            if self.peek("**"):
                if stage >= _KWARGS:
                    raise self.fail("only one **kwargs capture is allowed")
                self.pos += 2
                self.kwargs_name = self.name("a name after '**'")
                stage = _KWARGS
            elif self.peek("*"):
                if stage >= _ARGS:
                    raise self.fail("*args must come before **kwargs and appear once")
                self.pos += 1
                self.args_name = self.name("a name after '*'")
                stage = _ARGS
            elif self.peek("{"):
                if stage >= _HASH:
                    raise self.fail("the named parameter block must follow positional parameters and appear once")
                self.hash_block()
                stage = _HASH
            else:
                if stage > _POSITIONAL:
                    raise self.fail("positional parameters must come first")
                param_name = self.name("a parameter name")
                self.expect(":")
                self.positional.append(PositionalParam(param_name, self.param_type(param_name)))

            if self.at_end():
                break
            if self.peek(","):
                self.pos += 1
            elif not (self.peek("{") or self.peek("*")):
                raise self.fail(f"unexpected '{self.text[self.pos]}'")
        return self

    def hash_block(self):
        self.expect("{")
        if self.peek("}"):
            self.pos += 1
            return
        while True:
            hash_name = self.name("a named parameter")
            self.expect(":")
            hash_type = self.param_type(hash_name)
            if not self.peek("="):
                raise self.fail(f"named parameter {hash_name} must declare a default")
            self.pos += 1
            self.named.append(HashParam(hash_name, hash_type, self.literal(hash_name)))
            if self.peek("}"):
                self.pos += 1
                return
            self.expect(",")


def parse_signature(name: str, signature: str, body: Callable[..., Any]) -> HelperSpec:
    """Parses ``signature`` and returns the validated HelperSpec for helper ``name``."""
    if not isinstance(signature, str):
        raise SpecError(f"signature must be a string, got {type(signature).__name__}", helper=name)
    parsed = _SignatureParser(signature, name).parse()
    spec = HelperSpec(
        name=name,
        body=body,
        positional=tuple(parsed.positional),
        named=tuple(parsed.named),
        variadic_args_name=parsed.args_name,
        variadic_kwargs_name=parsed.kwargs_name,
        signature=signature.strip(),
    ).validate()
    log.debug("helper_signature_parsed", helper=name, positional=len(spec.positional),
              named=len(spec.named), has_args=bool(spec.variadic_args_name),
              has_kwargs=bool(spec.variadic_kwargs_name))
    return spec


def describe_spec(spec: HelperSpec) -> List[Tuple[str, str, str, str]]:
    """Rows of (kind, name, type, default) for displaying a spec."""
    rows = [("positional", p.name, p.type.value, "") for p in spec.positional]
    rows += [("hash", h.name, h.type.value, json.dumps(h.default)) for h in spec.named]
    if spec.variadic_args_name:
        rows.append(("*args", spec.variadic_args_name, "array", ""))
    if spec.variadic_kwargs_name:
        rows.append(("**kwargs", spec.variadic_kwargs_name, "object", ""))
    return rows
