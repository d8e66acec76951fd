# helperspec/core/templating/renderer.py
"""
Contains the TemplateRenderer class responsible for loading, compiling,
and rendering Handlebars templates with compiled helpers.
"""
from pathlib import Path
from typing import Dict, Any, Mapping, Optional
import pybars # type: ignore
import structlog

from helperspec.core.helper import CompiledHelper
from helperspec.exceptions import HelperError, TemplateError
from helperspec.util import read_text_file

from .helpers import BUILTIN_HELPERS

log = structlog.get_logger(__name__)

class TemplateRenderer:
    """Manages compilation and rendering of a Handlebars template."""
    def __init__(self, template_source: str, source_name: str = "inline",
                 helpers: Optional[Mapping[str, CompiledHelper]] = None, include_builtins: bool = True):
        self.template_source_name = source_name
        self.handlebars_compiler = pybars.Compiler()
        self.registered_helpers: Dict[str, CompiledHelper] = dict(BUILTIN_HELPERS) if include_builtins else {}
        for name, helper in (helpers or {}).items():
            self.register_helper(helper, name)

        try:
            self.compiled_template_function = self.handlebars_compiler.compile(template_source)
            log.debug("template_compiled_successfully", source=self.template_source_name)
        except Exception as e:
            log.error("template_compilation_failed", source=self.template_source_name, error=str(e), exc_info=True)
            raise TemplateError(f"Failed to compile template from '{self.template_source_name}': {e}") from e

    @classmethod
    def from_path(cls, template_path: Path, encoding: str = "utf-8", **kwargs: Any) -> "TemplateRenderer":
        log.info("loading_template_from_path", path=str(template_path))
        try:
            source = read_text_file(template_path, encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(f"Failed to read template file {template_path}: {e}") from e
        return cls(source, source_name=f"file:{template_path}", **kwargs)

    def register_helper(self, helper: CompiledHelper, name: Optional[str] = None):
        """Registers a compiled helper under ``name`` (its own name by default)."""
        if not isinstance(helper, CompiledHelper):
            raise TemplateError(f"Helper '{name}' is {type(helper).__name__}, not a compiled helper")
        registered_name = name or helper.name
        if registered_name in self.registered_helpers:
            log.debug("helper_replaced", helper=registered_name)
        self.registered_helpers[registered_name] = helper

    def render(self, template_context_data: Mapping[str, Any]) -> str:
        """Renders the compiled template with the given context data."""
        log.info("rendering_template_with_context", source=self.template_source_name,
                 context_keys=list(template_context_data.keys()))
        try:
            rendered_string = self.compiled_template_function(
                template_context_data, helpers=self.registered_helpers
            )
        except HelperError as e:
            log.error("helper_failed_during_render", source=self.template_source_name,
                      helper=e.helper, error_message=str(e))
            raise TemplateError(f"Template render failed for '{self.template_source_name}': {e}") from e
        except Exception as e:
            log.error("template_rendering_error_occurred", source=self.template_source_name,
                      error_message=str(e), exc_info=True)
            raise TemplateError(f"Template render failed for '{self.template_source_name}': {e}") from e
        log.debug("template_rendered_successfully", source=self.template_source_name)
        return str(rendered_string)
