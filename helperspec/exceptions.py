import json
from typing import Any, Mapping, Sequence


def describe_value(value: Any) -> str:
    # renders a dynamic value the way it would look as json, for diagnostics.
    try:
        return json.dumps(value, sort_keys=False, default=repr)
    except (TypeError, ValueError):
        return repr(value)


class HelperSpecError(Exception):
    # base exception for all application-specific errors.
    pass

class SpecError(HelperSpecError):
    # malformed helper specification, raised at definition time only.
    def __init__(self, message: str, helper: str | None = None, column: int | None = None):
        self.helper = helper
        self.column = column
        prefix = f"`{helper}` helper: " if helper else ""
        suffix = f" (at column {column})" if column is not None else ""
        super().__init__(f"{prefix}{message}{suffix}")

class ConfigError(HelperSpecError):
    # errors related to configuration.
    pass

class TemplateError(HelperSpecError):
    # errors related to template loading or rendering.
    pass

class HelperError(HelperSpecError):
    # errors raised while a compiled helper is being invoked.
    def __init__(self, helper: str, message: str):
        self.helper = helper
        super().__init__(f"`{helper}` helper: {message}")

class MissingParameter(HelperError):
    # a declared positional parameter had no argument at the call site.
    def __init__(self, helper: str, param: str, index: int):
        self.param = param
        self.index = index
        super().__init__(helper, f"Couldn't read parameter {param} (position {index})")

class TypeMismatch(HelperError):
    # a positional argument was supplied but has the wrong shape.
    def __init__(self, helper: str, param: str, expected_type: str, actual_value: Any, all_params: Sequence[Any]):
        self.param = param
        self.expected_type = expected_type
        self.actual_value = actual_value
        self.all_params = list(all_params)
        super().__init__(
            helper,
            f"Couldn't convert parameter {param} to type `{expected_type}`. "
            f"It's {describe_value(actual_value)} as JSON. "
            f"Got these params: {describe_value(self.all_params)}",
        )

class HashTypeMismatch(HelperError):
    # a named (hash) argument was supplied but has the wrong shape.
    def __init__(self, helper: str, hash_name: str, expected_type: str, actual_value: Any, all_hash: Mapping[str, Any]):
        self.hash_name = hash_name
        self.expected_type = expected_type
        self.actual_value = actual_value
        self.all_hash = dict(all_hash)
        super().__init__(
            helper,
            f"Couldn't convert hash {hash_name} to type `{expected_type}`. "
            f"It's {describe_value(actual_value)} as JSON. "
            f"Got these hash: {describe_value(self.all_hash)}",
        )

class ResultConversionError(HelperError):
    # the body returned something the dynamic value model cannot represent.
    def __init__(self, helper: str, value: Any, reason: str):
        self.value = value
        super().__init__(helper, f"Couldn't convert result {value!r} to a JSON value: {reason}")
