import click
from dependency_injector.wiring import Provide, inject

from stubsweep.core.containers import Container


@click.command()
@click.argument(
    "target_dir", default=".", type=click.Path(exists=True, file_okay=False)
)
@click.option(
    "--yes", "-y", "assume_yes", is_flag=True, help="Skip the confirmation prompt."
)
@inject
def clean(
    target_dir,
    assume_yes,
    cleanup_service: Container.cleanup_service = Provide[Container.cleanup_service],
):
    """Remove JavaScript stubs that have TypeScript replacements."""
    cleanup_service.run(target_dir=target_dir, assume_yes=assume_yes)
