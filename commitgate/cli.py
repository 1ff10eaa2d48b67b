#!/usr/bin/env python3
import asyncio
import os
import sys
from pathlib import Path
from typing import List, Optional

import click
from git import Repo
from rich.console import Console

from .commit_message import validate_commit_range, validate_file
from .config import DEFAULT_CONFIG_FILENAME, Config
from .observers import ConsoleLogObserver, FileLogObserver, ValidationObserver
from .pr.github import GithubClient
from .pr.snapshot import PullRequest, ReleaseContext
from .pr.validation import (
    PullRequestValidationFailure,
    ValidationName,
    assert_valid_pull_request,
    create_validation_config,
)

console = Console()


def run_async(coro):
    """Run an async coroutine to completion."""
    return asyncio.run(coro)


def build_observers(config: Config, log_file: Optional[Path]) -> List[ValidationObserver]:
    observers: List[ValidationObserver] = [ConsoleLogObserver(console)]
    log_file_path = log_file or config.get_log_file()
    if log_file_path:
        observers.append(FileLogObserver(str(log_file_path)))
    return observers


def print_failures(failures: List[PullRequestValidationFailure], force: bool) -> bool:
    """Print pull request failures and return whether any of them blocks the merge."""
    blocked = False
    for failure in failures:
        ignored = force and failure.can_be_force_ignored
        blocked = blocked or not ignored
        style = "yellow" if ignored else "red"
        suffix = " (ignored with --force)" if ignored else ""
        console.print(
            f"✘ [{failure.validation_name}] {failure.message}{suffix}",
            style=style,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    if blocked and not force and all(f.can_be_force_ignored for f in failures):
        console.print("[dim]All failures can be ignored with --force.[/dim]")
    return blocked


@click.group(invoke_without_command=True)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log validation results (overrides config setting)",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
@click.pass_context
def main(ctx: click.Context, path: Path, log_file: Optional[Path], version: bool):
    """
    Commit message and pull request merge policy checks.

    Configuration can be set in .commitgate.toml in the repository root.
    """
    if version:
        from .version import display_version_info

        display_version_info()
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    repo_path = path.absolute()
    ctx.obj = {
        "repo_path": repo_path,
        "log_file": log_file,
        "config": Config.load(repo_path),
    }


@main.command("validate-range")
@click.argument("starting_ref")
@click.argument("ending_ref", default="HEAD")
@click.pass_obj
def validate_range_command(obj: dict, starting_ref: str, ending_ref: str):
    """Validate the commit messages in STARTING_REF..ENDING_REF."""
    if os.environ.get("CI") and os.environ.get("CI_PULL_REQUEST") == "false":
        console.print("Since valid commit messages are enforced by PR linting on CI, we do not")
        console.print("need to validate commit messages on CI runs on upstream branches.")
        console.print()
        console.print("Skipping check of provided commit range")
        return

    config: Config = obj["config"]
    try:
        result = run_async(
            validate_commit_range(
                starting_ref,
                ending_ref,
                repo_path=str(obj["repo_path"]),
                config=config.require_commit_message(),
                console=console,
                observers=build_observers(config, obj["log_file"]),
            )
        )
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()

    sys.exit(result.exit_code)


@main.command("validate-file")
@click.option("--file", "file_path", type=click.Path(dir_okay=False, path_type=Path),
              help="The path of the commit message file.")
@click.option("--file-env-variable",
              help="The environment variable holding the path of the commit message file.")
@click.option("--error/--no-error", "error_mode", default=None,
              help="Treat invalid commit messages as failures rather than warnings "
                   "(defaults to true on CI).")
@click.pass_obj
def validate_file_command(
    obj: dict,
    file_path: Optional[Path],
    file_env_variable: Optional[str],
    error_mode: Optional[bool],
):
    """Validate a commit message file, e.g. from a commit-msg hook."""
    if file_path is not None and file_env_variable is not None:
        raise click.UsageError("--file and --file-env-variable are mutually exclusive")
    if file_env_variable is not None:
        env_value = os.environ.get(file_env_variable)
        if not env_value:
            raise click.UsageError(
                f'Provided environment variable "{file_env_variable}" was not found.'
            )
        file_path = Path(env_value)
    if file_path is None:
        file_path = Path(".git") / "COMMIT_EDITMSG"
    if error_mode is None:
        error_mode = bool(os.environ.get("CI"))

    config: Config = obj["config"]
    try:
        exit_code = validate_file(
            obj["repo_path"] / file_path,
            error_mode,
            config=config.require_commit_message(),
            console=console,
        )
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()

    sys.exit(exit_code)


@main.command("check-pr")
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--force", is_flag=True,
              help="Ignore failures of validations that can be force-ignored")
@click.option("--target-label",
              help="Target label of the pull request; enables the target label validation")
@click.option("--feature-freeze", is_flag=True,
              help="Whether the next release train is in feature freeze")
@click.option("--token", envvar="GITHUB_TOKEN", help="GitHub token for validations that query GitHub")
@click.pass_obj
def check_pr_command(
    obj: dict,
    snapshot: Path,
    force: bool,
    target_label: Optional[str],
    feature_freeze: bool,
    token: Optional[str],
):
    """Check whether the pull request in SNAPSHOT (JSON) may be merged."""
    config: Config = obj["config"]

    async def check() -> List[PullRequestValidationFailure]:
        pull_request = PullRequest.load(snapshot)
        validation_config = create_validation_config(config.pull_request.validation)
        release_context = ReleaseContext(is_feature_freeze=feature_freeze) if target_label else None
        repo = None
        if validation_config[ValidationName.ISOLATED_SEPARATE_FILES.value]:
            repo = Repo(obj["repo_path"])
        github = GithubClient(config.github, token=token) if config.github else None
        try:
            return await assert_valid_pull_request(
                pull_request,
                validation_config,
                config,
                release_context=release_context,
                target_label=target_label,
                github=github,
                repo=repo,
                observers=build_observers(config, obj["log_file"]),
            )
        finally:
            if github is not None:
                await github.client.aclose()

    try:
        failures = run_async(check())
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()

    sys.exit(1 if print_failures(failures, force) else 0)


@main.command("config-list")
@click.pass_obj
def config_list_command(obj: dict):
    """Display current configuration settings."""
    config: Config = obj["config"]
    config_path = obj["repo_path"] / DEFAULT_CONFIG_FILENAME

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config_path.exists():
        console.print(f"[dim]Config file: {str(config_path).replace(os.sep, '/')}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    commit_message = config.commit_message
    if commit_message is not None:
        console.print(f"{'max_line_length':<32} {commit_message.max_line_length}")
        console.print(f"{'min_body_length':<32} {commit_message.min_body_length}")
        console.print(f"{'scopes':<32} {', '.join(commit_message.scopes) or '-'}")
        console.print(f"{'types':<32} {', '.join(commit_message.types)}")

    validation_config = create_validation_config(config.pull_request.validation)
    console.print("\n[bold]Pull request validations:[/bold]")
    for name, enabled in validation_config.items():
        state = "[green]enabled[/green]" if enabled else "[dim]disabled[/dim]"
        console.print(f"{name:<32} {state}")


@main.command("config-init")
@click.pass_obj
def config_init_command(obj: dict):
    """Create a config file with default values."""
    repo_path: Path = obj["repo_path"]
    config_path = repo_path / DEFAULT_CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[yellow]Config file already exists:[/yellow] {config_path}")
        return

    Config().save(repo_path)
    console.print("[yellow]Created new config file with default values[/yellow]")
    console.print(f"[green]Config file location:[/green] {config_path}")


if __name__ == "__main__":
    main()
