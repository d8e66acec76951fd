# helperspec/diagnostics.py
"""
Loggers for the helper invocation path.

Setting HELPERSPEC_NO_LOGGING before the package is imported swaps every
logger handed out here for a structlog filtering logger whose debug to error
methods are no-ops, so trace calls on the binding path cost a bare function call.
The switch is read once at import time and never consulted again.
"""
import logging
import os

import structlog

NO_LOGGING_ENV_VAR = "HELPERSPEC_NO_LOGGING"

def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")

LOGGING_DISABLED: bool = _env_flag(os.environ.get(NO_LOGGING_ENV_VAR))

# every level method below CRITICAL is structlog's _nop; critical lands in a ReturnLogger.
_SilentLogger = structlog.make_filtering_bound_logger(logging.CRITICAL)

def silent_logger():
    return _SilentLogger(structlog.ReturnLogger(), processors=[], context={})

def get_logger(name: str):
    if LOGGING_DISABLED:
        return silent_logger()
    return structlog.get_logger(name)
