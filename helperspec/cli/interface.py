# helperspec/cli/interface.py
import sys
import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import click
from click_option_group import optgroup
from rich.console import Console as RichConsole
import structlog

from helperspec import __version__ as app_version
from helperspec.config.loader import load_settings
from helperspec.config.settings import HelperSettings, LogLevel
from helperspec.core.invocation import HelperInvocation
from helperspec.core.helper import compile_helper
from helperspec.core.templating import TemplateRenderer, load_all_helpers
from helperspec.exceptions import HelperSpecError, HelperError, ConfigError
from helperspec.logging_setup import configure_logging
from helperspec.util import read_text_file

from .console_output import print_spec_table, print_render_summary

log = structlog.get_logger(__name__)

def _fail(e: Exception, event: str):
    log.error(event, error_type=type(e).__name__, message=str(e))
    click.secho(f"Error: {e}", fg="red", err=True)
    sys.exit(1)

def _parse_json_option(raw: Optional[str], option_name: str, expected: type) -> Any:
    if raw is None:
        return expected()
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e.msg}", param_hint=option_name)
    if not isinstance(value, expected):
        raise click.BadParameter(f"must be a JSON {'array' if expected is list else 'object'}", param_hint=option_name)
    return value

def _echo_bindings(**bindings: Any) -> Dict[str, Any]:
    return bindings


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@optgroup.group("Application Behavior", help="Configuration and logging.")
@optgroup.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@optgroup.option("--force-json-logs", "force_json_logs_cli", is_flag=True, default=False, help="Force JSON logs.")
@click.version_option(version=app_version, package_name="helperspec", prog_name="helperspec", help="Show version and exit.")
@click.pass_context
def main_cli_group(ctx: click.Context, verbosity_level: int, force_json_logs_cli: bool):
    """helperspec: declare Handlebars helpers from terse typed signatures,
    inspect them and render templates with them."""
    overrides: Dict[str, Any] = {}
    if verbosity_level == 1: overrides["log_level"] = LogLevel.INFO
    elif verbosity_level >= 2: overrides["log_level"] = LogLevel.DEBUG
    if force_json_logs_cli: overrides["force_json_logs"] = True

    try:
        settings = load_settings(overrides=overrides)
    except ConfigError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    configure_logging(log_level_str=settings.log_level.value, force_json_logs=settings.force_json_logs)
    log.debug("cli_command_invoked", subcommand=ctx.invoked_subcommand, settings=str(settings))
    ctx.obj = settings


@main_cli_group.command("check")
@click.argument("signature")
@click.option("--name", "helper_name", default="helper", show_default=True, help="Helper name used in diagnostics.")
@optgroup.group("Trial Call", help="Bind a sample call against the signature and print the bindings.")
@optgroup.option("--params", "params_json", default=None, metavar="JSON_ARRAY", help="Positional arguments, e.g. '[12]'.")
@optgroup.option("--hash", "hash_json", default=None, metavar="JSON_OBJECT", help="Named arguments, e.g. '{\"compare\": 20}'.")
def check_command(signature: str, helper_name: str, params_json: Optional[str], hash_json: Optional[str]):
    """Parse SIGNATURE and show the parameters it declares."""
    try:
        helper = compile_helper(helper_name, signature, _echo_bindings)
    except HelperSpecError as e:
        _fail(e, "signature_rejected")

    print_spec_table(helper.spec, RichConsole())

    if params_json is None and hash_json is None:
        return
    params = _parse_json_option(params_json, "--params", list)
    hash_args = _parse_json_option(hash_json, "--hash", dict)
    try:
        result = helper.invoke(HelperInvocation(params, hash_args))
    except HelperError as e:
        _fail(e, "trial_call_failed")
    click.echo(json.dumps(result.value, indent=2))


@main_cli_group.command("render")
@click.argument("template_path", type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path))
@optgroup.group("Input Options", help="Template data and helpers.")
@optgroup.option("-d", "--data", "data_path", type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path), default=None, help="JSON file with the template context.")
@optgroup.option("-H", "--helpers", "helper_refs", multiple=True, metavar="MODULE[:ATTR]", help="Helpers to register, in addition to configured and built-in ones.")
@optgroup.option("--no-builtins", "no_builtins", is_flag=True, default=False, help="Do not register the built-in helpers.")
@optgroup.group("Output Options", help="Where the rendered text goes.")
@optgroup.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, writable=True, path_type=Path), default=None, help="Path to write the output to.")
@optgroup.option("--summary", "show_summary", is_flag=True, default=False, help="Print a render summary on stderr.")
@click.pass_obj
def render_command(settings: HelperSettings, template_path: Path, data_path: Optional[Path],
                   helper_refs: Tuple[str, ...], no_builtins: bool, output_file: Optional[Path], show_summary: bool):
    """Render TEMPLATE_PATH with Handlebars and the registered helpers."""
    try:
        context: Dict[str, Any] = {}
        if data_path:
            try:
                context = json.loads(read_text_file(data_path, settings.encoding))
            except (OSError, ValueError) as e:
                raise ConfigError(f"Could not read template data from {data_path}: {e}") from e
            if not isinstance(context, dict):
                raise ConfigError(f"Template data in {data_path} must be a JSON object")

        helpers = load_all_helpers([*settings.helper_modules, *helper_refs])
        renderer = TemplateRenderer.from_path(template_path, settings.encoding,
                                              helpers=helpers, include_builtins=not no_builtins)
        output = renderer.render(context)
    except HelperSpecError as e:
        _fail(e, "handled_application_error_in_cli")

    if output_file:
        output_file.write_text(output, encoding=settings.encoding)
        click.echo(f"Info: Output written to: {output_file}", err=True)
    else:
        click.echo(output, nl=False)

    if show_summary:
        print_render_summary(renderer.template_source_name, renderer.registered_helpers.keys(), len(output))
