"""Entry point for the skiptools command-line interface."""

import click

from skiptools import __version__
from skiptools.cli.commands.filter import filter_cmd, tools_cmd


@click.group()
@click.version_option(version=__version__, prog_name="skiptools")
def main() -> None:
    """Filter the tools offered to a language model by conversation keywords.

    Tools declare keywords and dependencies in a 'skip:' block at the end of
    their description. Tools whose keywords appear in the conversation are
    kept, along with the tools they depend on.
    """
    pass


main.add_command(filter_cmd)
main.add_command(tools_cmd)


if __name__ == "__main__":
    main()
