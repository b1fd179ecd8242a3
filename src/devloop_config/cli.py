"""Typer command line for ``devloop config``.

Reads and edits the devloop configuration file. Values live either in the
global record or in a record for one kube context; without ``--global`` the
commands target the kube context given with ``--kube-context`` or, failing
that, the current context of the kubeconfig.
"""

import logging
from pathlib import Path
from typing import NoReturn

import typer
import yaml
from rich.console import Console

from . import __version__
from .exceptions import ConfigError
from .manager import ConfigManager
from .models import ScopeSelector

CONFIG_ENV_VAR = "DEVLOOP_CONFIG"
DEFAULT_CONFIG_FILE = Path.home() / ".devloop" / "config.yaml"

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

CONFIG_FILE_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    dir_okay=False,
    envvar=CONFIG_ENV_VAR,
    help="Path to the devloop config file (default: ~/.devloop/config.yaml).",
)

GLOBAL_OPTION = typer.Option(
    False,
    "--global",
    "-g",
    help="Target the global config instead of a kube context.",
)

KUBE_CONTEXT_OPTION = typer.Option(
    None,
    "--kube-context",
    "-k",
    help="Kube context to target (default: the kubeconfig's current context).",
)

KUBECONFIG_OPTION = typer.Option(
    None,
    "--kubeconfig",
    dir_okay=False,
    help="Kubeconfig used to find the current context.",
)

app = typer.Typer(add_completion=False, help="Developer workflow CLI for container-based projects.")
config_app = typer.Typer(help="Inspect and edit the devloop config.")
app.add_typer(config_app, name="config")


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-V", help="Show the version and exit."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Entry point callback invoked for every CLI execution."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if version:
        console.print(f"devloop-config {__version__}")
        raise typer.Exit(code=0)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(code=0)


def _manager(config_file: Path | None, kubeconfig: Path | None) -> ConfigManager:
    return ConfigManager(config_file or DEFAULT_CONFIG_FILE, kubeconfig=kubeconfig)


def _fail(error: ConfigError) -> NoReturn:
    err_console.print(f"Error: {error}", markup=False, soft_wrap=True)
    raise typer.Exit(code=1)


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Setting to change, e.g. default-repo."),
    value: str = typer.Argument(..., help="New value."),
    config_file: Path | None = CONFIG_FILE_OPTION,
    global_scope: bool = GLOBAL_OPTION,
    kube_context: str | None = KUBE_CONTEXT_OPTION,
    kubeconfig: Path | None = KUBECONFIG_OPTION,
) -> None:
    """Set a value in the devloop config."""
    manager = _manager(config_file, kubeconfig)
    try:
        selector = manager.resolve_scope(ScopeSelector(global_scope, kube_context))
        manager.set_config_value(selector, key, value)
    except ConfigError as exc:
        _fail(exc)

    if selector.global_scope:
        console.print(f"set global value {key} to {value}", markup=False, soft_wrap=True)
    else:
        console.print(f"set value {key} to {value} for context {selector.kube_context}", markup=False, soft_wrap=True)


@config_app.command("unset")
def config_unset(
    key: str = typer.Argument(..., help="Setting to reset, e.g. default-repo."),
    config_file: Path | None = CONFIG_FILE_OPTION,
    global_scope: bool = GLOBAL_OPTION,
    kube_context: str | None = KUBE_CONTEXT_OPTION,
    kubeconfig: Path | None = KUBECONFIG_OPTION,
) -> None:
    """Unset a value in the devloop config."""
    manager = _manager(config_file, kubeconfig)
    try:
        selector = manager.resolve_scope(ScopeSelector(global_scope, kube_context))
        manager.unset_config_value(selector, key)
    except ConfigError as exc:
        _fail(exc)

    if selector.global_scope:
        console.print(f"unset global value {key}", markup=False, soft_wrap=True)
    else:
        console.print(f"unset value {key} for context {selector.kube_context}", markup=False, soft_wrap=True)


@config_app.command("list")
def config_list(
    config_file: Path | None = CONFIG_FILE_OPTION,
    global_scope: bool = GLOBAL_OPTION,
    kube_context: str | None = KUBE_CONTEXT_OPTION,
    kubeconfig: Path | None = KUBECONFIG_OPTION,
    show_all: bool = typer.Option(False, "--all", "-a", help="Show the whole config file."),
    effective: bool = typer.Option(False, "--effective", help="Merge the global values under the context's."),
) -> None:
    """Show values from the devloop config."""
    manager = _manager(config_file, kubeconfig)
    try:
        if show_all:
            data = manager.read_config().to_dict()
        else:
            selector = manager.resolve_scope(ScopeSelector(global_scope, kube_context))
            if effective and not selector.global_scope:
                data = manager.get_effective_config(selector.kube_context or "")
            else:
                data = manager.get_config_for_scope(selector).to_dict()
    except ConfigError as exc:
        _fail(exc)

    text = yaml.dump(data, default_flow_style=False, sort_keys=False) if data else "{}\n"
    console.print(text, end="", markup=False, soft_wrap=True)


def main() -> None:
    """Console script entry point."""
    app(prog_name="devloop")
