"""Main CLI interface for Build Husky."""

import logging
import os
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from build_husky import __version__
from build_husky.core.config import load_config
from build_husky.core.installer import hook_path, hook_status, install_hooks
from build_husky.core.resolver import read_out_dir, resolve_metadata_dir
from build_husky.core.script import render_script
from build_husky.errors import HuskyError
from build_husky.models.config import HuskyConfig
from build_husky.models.hook import HookState

console = Console()
logger = logging.getLogger(__name__)

KNOWN_HOOKS = ["pre-push", "pre-commit", "post-merge"]

STATE_STYLES = {
    HookState.MISSING: "dim",
    HookState.CURRENT: "green",
    HookState.FOREIGN: "yellow",
}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config_or_exit(project_root: Path, **overrides) -> HuskyConfig:
    try:
        return load_config(project_root, overrides)
    except HuskyError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort() from e


@click.group()
@click.version_option(__version__, prog_name="build-husky")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """Build Husky - install git hooks from your build step."""
    _setup_logging(verbose)


@main.command()
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Build output directory to search from (default: $OUT_DIR)",
)
@click.option(
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Directory holding pyproject.toml",
)
@click.option("--pre-push/--no-pre-push", default=None, help="Install the pre-push hook")
@click.option(
    "--pre-commit/--no-pre-commit", default=None, help="Install the pre-commit hook"
)
@click.option(
    "--post-merge/--no-post-merge", default=None, help="Install the post-merge hook"
)
@click.option("--run-tests/--no-run-tests", default=None, help="Run tests in hooks")
@click.option("--run-lint/--no-run-lint", default=None, help="Run the linter in hooks")
@click.option(
    "--run-format/--no-run-format", default=None, help="Check formatting in hooks"
)
def install(
    out_dir: Optional[Path],
    project_root: Path,
    pre_push: Optional[bool],
    pre_commit: Optional[bool],
    post_merge: Optional[bool],
    run_tests: Optional[bool],
    run_lint: Optional[bool],
    run_format: Optional[bool],
):
    """Install enabled hooks into the repository enclosing the build output."""
    config = _load_config_or_exit(
        project_root,
        prepush_hook=pre_push,
        precommit_hook=pre_commit,
        postmerge_hook=post_merge,
        run_tests=run_tests,
        run_lint=run_lint,
        run_format=run_format,
    )

    try:
        if out_dir is None:
            out_dir = read_out_dir(os.environ)
        results = install_hooks(out_dir, config)
    except HuskyError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort() from e

    if not results:
        console.print("[yellow]No hooks enabled[/yellow]")
        return

    for result in results:
        if result.written:
            console.print(f"[green]✅ Installed {result.name}[/green] → {result.path}")
        else:
            console.print(f"[dim]{result.name} already up to date[/dim]")


@main.command()
@click.option(
    "--path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Directory to search for the git metadata directory from",
)
def status(path: Path):
    """Show which hooks are installed by this version."""
    try:
        metadata_dir = resolve_metadata_dir(path)
    except HuskyError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort() from e

    console.print(f"[bold]Git directory:[/bold] {metadata_dir}")

    table = Table(title=f"Hooks (build-husky v{__version__})")
    table.add_column("Hook", style="cyan", no_wrap=True)
    table.add_column("State", no_wrap=True)
    table.add_column("Path", style="dim")

    for name in KNOWN_HOOKS:
        state = hook_status(metadata_dir, name)
        style = STATE_STYLES[state]
        table.add_row(
            name, f"[{style}]{state.value}[/{style}]", str(hook_path(metadata_dir, name))
        )

    console.print(table)


@main.command()
@click.argument("hook", type=click.Choice(KNOWN_HOOKS))
@click.option(
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Directory holding pyproject.toml",
)
def show(hook: str, project_root: Path):
    """Print the script that would be installed for HOOK."""
    config = _load_config_or_exit(project_root)
    if hook not in config.hook_names:
        logger.warning("%s is not enabled in the current configuration", hook)
    out_dir = os.environ.get("OUT_DIR", "")
    click.echo(render_script(config.command_groups, out_dir=out_dir), nl=False)


if __name__ == "__main__":
    main()
