# helperspec/core/params.py
from enum import Enum
from typing import Any, Callable, Dict, Optional

import structlog

from . import values

log = structlog.get_logger(__name__)

class ParamType(Enum):
    # semantic type tags a helper parameter can declare.
    OBJECT = "object"
    ARRAY = "array"
    STR = "str"
    I64 = "i64"
    U64 = "u64"
    F64 = "f64"
    BOOL = "bool"
    NULL = "null"
    JSON = "Json"

    @classmethod
    def from_string(cls, s: Optional[str]) -> Optional["ParamType"]:
        if not s:
            return None
        try:
            return cls(s)
        except ValueError:
            log.warning("invalid_param_type_string", input_string=s)
            return None

    def coerce(self, value: Any) -> Any:
        # returns the value viewed as this type, or values.MISSING.
        return _ACCESSORS[self](value)

_ACCESSORS: Dict[ParamType, Callable[[Any], Any]] = {
    ParamType.OBJECT: values.as_object,
    ParamType.ARRAY: values.as_array,
    ParamType.STR: values.as_str,
    ParamType.I64: values.as_i64,
    ParamType.U64: values.as_u64,
    ParamType.F64: values.as_f64,
    ParamType.BOOL: values.as_bool,
    ParamType.NULL: values.as_null,
    ParamType.JSON: values.as_json,
}
