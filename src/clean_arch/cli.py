"""Command-line interface.

  clean-arch check PATH      report Dependency Rule violations
  clean-arch layers          show the layer map
  clean-arch demo            register and look up a user end to end
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .__version__ import __version__
from .architecture import DependencyRuleChecker, default_layer_map
from .config import RepositoryBackend, get_settings, load_settings
from .core.exceptions import CleanArchError
from .features.users import RegisterUserRequest, UserServiceFactory

console = Console()


@click.group()
@click.version_option(__version__, prog_name="clean-arch")
def cli():
    """Clean Architecture reference tooling."""
    pass


@cli.command()
@click.argument("path", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--package", "package_name", default=None, help="Import name of the package (defaults to the directory name)")
def check(path: Path, package_name: Optional[str]):
    """Check PATH for imports that break the Dependency Rule."""
    checker = DependencyRuleChecker()
    try:
        violations = checker.check(path, package_name)
    except CleanArchError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        sys.exit(2)

    name = package_name or path.resolve().name
    if not violations:
        console.print(f"[green]✓ No Dependency Rule violations in {name}[/green]")
        return

    table = Table(title=f"Dependency Rule violations in {name}")
    table.add_column("Module", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Imports", style="magenta")
    table.add_column("From layer")
    table.add_column("To layer", style="red")

    for violation in violations:
        table.add_row(
            violation.module,
            str(violation.lineno),
            violation.imported,
            violation.source_layer,
            violation.target_layer,
        )

    console.print(table)
    console.print(f"[red]✗ {len(violations)} violation(s)[/red]")
    sys.exit(1)


@cli.command()
@click.option("--package", "package_name", default="clean_arch", help="Package the patterns are generated for")
def layers(package_name: str):
    """Show the layer map, innermost first."""
    table = Table(title=f"Layers for {package_name}")
    table.add_column("Rank", justify="right")
    table.add_column("Layer", style="cyan")
    table.add_column("Patterns")

    for layer in default_layer_map(package_name):
        table.add_row(str(layer.rank), layer.name, "\n".join(layer.patterns))

    console.print(table)


async def _run_demo(factory: UserServiceFactory, name: str, email: str):
    service = factory.create_service()
    response = await service.register_user.execute(RegisterUserRequest(name=name, email=email))
    found = await service.get_user_by_email.execute(email)
    return response.user, found


@cli.command()
@click.option("--name", default="Ada Lovelace", show_default=True, help="User name")
@click.option("--email", default="ada@example.com", show_default=True, help="User email")
@click.option(
    "--backend",
    type=click.Choice([backend.value for backend in RepositoryBackend]),
    default=None,
    help="Repository backend (defaults to CLEAN_ARCH_REPOSITORY_BACKEND)",
)
def demo(name: str, email: str, backend: Optional[str]):
    """Register a user and look it up by email."""
    try:
        if backend is None:
            settings = get_settings()
        else:
            settings = load_settings(repository_backend=backend)
        factory = UserServiceFactory(settings=settings)
        registered, found = asyncio.run(_run_demo(factory, name, email))
    except CleanArchError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        sys.exit(1)

    console.print(Panel.fit(
        f"[bold]id:[/bold] {registered.id}\n"
        f"[bold]name:[/bold] {registered.name}\n"
        f"[bold]email:[/bold] {registered.email}",
        title=f"Registered ({settings.repository_backend.value})",
    ))

    if found is None:
        console.print(f"[yellow]Lookup by email {email}: not found[/yellow]")
    else:
        console.print(f"[green]Lookup by email {email}: {found.id}[/green]")


def main():
    cli()


if __name__ == "__main__":
    main()
