"""Command-line interface for inspecting workspace builds."""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .build import BuildHandle
from .constants import WORKSPACE_ROOT_ENV
from .errors import EnumerationError, IdentityError
from .models import BuildDescriptor, Distribution, WorkspaceMember
from .registry import WorkspaceBuildRegistry
from .settings import SettingsIdentityResolver, write_settings
from .workspace import FilesystemWorkspace

console = Console()


def _member_for(project_dir: str) -> WorkspaceMember:
    path = Path(project_dir)
    return WorkspaceMember(name=path.resolve().name, path=path)


def _builds_table(title: str, handles: list[BuildHandle]) -> Table:
    table = Table(title=title)
    table.add_column("Root", style="cyan")
    table.add_column("Distribution", style="green")
    table.add_column("Java home", style="dim")
    table.add_column("Working dir", style="dim")
    table.add_column("JVM args")

    for handle in sorted(handles, key=lambda h: str(h.root_dir)):
        d = handle.descriptor
        table.add_row(
            str(d.root_dir),
            str(d.distribution),
            str(d.java_home) if d.java_home else "-",
            str(d.working_dir) if d.working_dir else "-",
            " ".join(d.jvm_arguments) or "-",
        )
    return table


@click.group()
@click.version_option(version=__version__)
def main():
    """Map workspace projects to the distinct builds they belong to."""
    pass


@main.command("list")
@click.option("--workspace", "workspace_root", type=click.Path(), default=".", envvar=WORKSPACE_ROOT_ENV,
              show_default=True, help="Workspace root directory")
@click.option("--format", "fmt", type=click.Choice(["table", "json"]), default="table")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def list_builds(workspace_root, fmt, verbose):
    """List the distinct builds of every workspace project.

    Projects with broken build settings are skipped (use -v to see which).

    Example:
        workspace-builds list --workspace ~/work --format json
    """
    registry = WorkspaceBuildRegistry(
        resolver=SettingsIdentityResolver(verbose=verbose),
        workspace=FilesystemWorkspace(workspace_root, verbose=verbose),
        verbose=verbose,
    )

    try:
        builds = registry.resolve_all_builds()
    except EnumerationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    handles = sorted(builds, key=lambda h: str(h.root_dir))
    if fmt == "json":
        click.echo(json.dumps([h.to_dict() for h in handles], indent=2))
    elif not handles:
        console.print("[yellow]No build-enabled projects found[/yellow]")
    else:
        console.print(_builds_table(f"Workspace Builds ({len(handles)})", handles))


@main.command()
@click.argument("project_dir", type=click.Path(exists=True, file_okay=False))
@click.option("--format", "fmt", type=click.Choice(["table", "json"]), default="table")
def show(project_dir, fmt):
    """Show the build a single project belongs to."""
    registry = WorkspaceBuildRegistry(resolver=SettingsIdentityResolver())
    member = _member_for(project_dir)

    try:
        handle = registry.resolve_build(member)
    except (IdentityError, EnumerationError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if handle is None:
        console.print(f"[yellow]{escape(member.name)} is not build-enabled[/yellow]")
        return

    if fmt == "json":
        click.echo(json.dumps(handle.to_dict(), indent=2))
    else:
        console.print(_builds_table(f"Build of {member.name}", [handle]))


@main.command()
@click.argument("project_dir", type=click.Path(exists=True, file_okay=False))
@click.option("--root", "root_dir", type=click.Path(), default=None,
              help="Build root directory (default: the project directory)")
@click.option("--distribution", default="wrapper", show_default=True,
              help="wrapper, version:<v>, local:<dir> or remote:<uri>")
@click.option("--java-home", type=click.Path(), default=None, help="Java home override")
@click.option("--jvm-arg", "jvm_arguments", multiple=True, help="JVM argument (repeatable)")
@click.option("--arg", "arguments", multiple=True, help="Build argument (repeatable)")
@click.option("--working-dir", type=click.Path(), default=None, help="Working directory override")
@click.option("--user-home", "build_user_home", type=click.Path(), default=None, help="Build user home override")
def enable(project_dir, root_dir, distribution, java_home, jvm_arguments, arguments, working_dir, build_user_home):
    """Mark a project as build-enabled by writing its build settings.

    Example:
        workspace-builds enable modules/app --root . --distribution version:8.5 --jvm-arg -Xmx2g
    """
    member = _member_for(project_dir)

    def _abs(path):
        return Path(path).resolve() if path else None

    try:
        descriptor = BuildDescriptor(
            root_dir=_abs(root_dir) or member.path.resolve(),
            distribution=Distribution.parse(distribution),
            build_user_home=_abs(build_user_home),
            java_home=_abs(java_home),
            jvm_arguments=jvm_arguments,
            arguments=arguments,
            working_dir=_abs(working_dir),
        )
    except IdentityError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    path = write_settings(member, descriptor)
    console.print(f"[green]{escape(member.name)} is now build-enabled[/green] (root: {escape(str(descriptor.root_dir))})")
    console.print(f"Settings written to {escape(str(path))}")


if __name__ == "__main__":
    main()
