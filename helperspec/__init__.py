# helperspec/__init__.py
"""helperspec: declare Handlebars helpers from a terse typed signature."""
__version__ = "0.1.0"

from helperspec.core import (
    CompiledHelper, HelperInvocation, HelperSpec, ParamType, ScopedValue,
    compile_helper, handlebars_helper, parse_signature,
)
from helperspec.exceptions import (
    HelperSpecError, SpecError, HelperError, MissingParameter,
    TypeMismatch, HashTypeMismatch, ResultConversionError,
)

__all__ = [
    "__version__",
    "CompiledHelper", "HelperInvocation", "HelperSpec", "ParamType", "ScopedValue",
    "compile_helper", "handlebars_helper", "parse_signature",
    "HelperSpecError", "SpecError", "HelperError", "MissingParameter",
    "TypeMismatch", "HashTypeMismatch", "ResultConversionError",
]
