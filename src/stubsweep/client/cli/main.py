import click
import logfire

from stubsweep.client.cli.commands.check import check
from stubsweep.client.cli.commands.clean import clean
from stubsweep.core.containers import Container

logfire.configure(send_to_logfire="if-token-present", console=False)

container = Container()
container.wire(
    modules=[
        "stubsweep.client.cli.commands.clean",
        "stubsweep.client.cli.commands.check",
    ]
)


@click.group(invoke_without_command=True)
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx):
    """Stubsweep: remove JavaScript stubs superseded by TypeScript files."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(clean)


cli.add_command(clean)
cli.add_command(check)


def main():
    cli()


if __name__ == "__main__":
    main()
