# helperspec/core/templating/helper_loader.py
"""
Resolves 'module:attribute' references to compiled helpers, so templates can be
rendered with helpers defined in user code.
"""
import importlib
from collections.abc import Mapping
from typing import Any, Dict, Iterable
import structlog

from helperspec.core.helper import CompiledHelper
from helperspec.exceptions import ConfigError

log = structlog.get_logger(__name__)

def _collect(value: Any, reference: str) -> Dict[str, CompiledHelper]:
    if isinstance(value, CompiledHelper):
        return {value.name: value}
    if isinstance(value, Mapping):
        found: Dict[str, CompiledHelper] = {}
        for registered_name, helper in value.items():
            if not isinstance(helper, CompiledHelper):
                raise ConfigError(f"'{reference}' maps '{registered_name}' to {type(helper).__name__}, not a compiled helper")
            found[registered_name] = helper
        return found
    if isinstance(value, (list, tuple)):
        found = {}
        for helper in value:
            found.update(_collect(helper, reference))
        return found
    raise ConfigError(f"'{reference}' is a {type(value).__name__}, not a compiled helper or a collection of them")

def load_helpers(reference: str) -> Dict[str, CompiledHelper]:
    """
    Imports the helpers named by ``reference``.

    'pkg.module:name' loads one attribute (a CompiledHelper, a mapping of
    registered name to CompiledHelper, or a list of them). 'pkg.module' alone
    loads every CompiledHelper defined at the module's top level.
    """
    module_name, _, attr = reference.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Could not import helper module '{module_name}': {e}") from e

    if attr:
        if not hasattr(module, attr):
            raise ConfigError(f"Module '{module_name}' has no attribute '{attr}'")
        helpers = _collect(getattr(module, attr), reference)
    else:
        helpers = {v.name: v for v in vars(module).values() if isinstance(v, CompiledHelper)}
        if not helpers:
            log.warning("no_helpers_found_in_module", module=module_name)
    log.info("helpers_loaded", reference=reference, names=sorted(helpers))
    return helpers

def load_all_helpers(references: Iterable[str]) -> Dict[str, CompiledHelper]:
    merged: Dict[str, CompiledHelper] = {}
    for reference in references:
        for name, helper in load_helpers(reference).items():
            if name in merged:
                log.warning("helper_overridden", helper=name, reference=reference)
            merged[name] = helper
    return merged
