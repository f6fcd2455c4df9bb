import click
from dependency_injector.wiring import Provide, inject
from rich.console import Console
from rich.markup import escape

from stubsweep.core.containers import Container
from stubsweep.core.presentation.logging import CleanupFormatter

console = Console(highlight=False)


@click.command()
@click.argument(
    "target_dir", default=".", type=click.Path(exists=True, file_okay=False)
)
@inject
def check(
    target_dir,
    cleanup_service: Container.cleanup_service = Provide[Container.cleanup_service],
):
    """Show which duplicate stubs remain, without removing anything."""
    statuses = cleanup_service.status(target_dir)

    console.print(f"[bold blue]Duplicate stubs in {escape(target_dir)}[/bold blue]")
    for status in statuses:
        console.print(CleanupFormatter.format_status(status), soft_wrap=True)

    remaining = sum(1 for s in statuses if s.present)
    if remaining:
        console.print(
            f"\n[yellow]{remaining} duplicate file(s) remain.[/yellow] Run 'stubsweep clean' to remove them."
        )
    else:
        console.print("\n[bold green]No duplicate stubs left.[/bold green]")
