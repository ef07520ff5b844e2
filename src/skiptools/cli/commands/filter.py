"""CLI commands for inspecting and filtering tool catalogs.

Implements 'skiptools filter', which runs the filtering engine over a
conversation, and 'skiptools tools', which lists a catalog's tools with
their parsed configuration.
"""

import json
import sys
from typing import Any

import click

from skiptools.config.loader import ToolCatalogLoader
from skiptools.lib.errors import ConfigError, SkipToolsError
from skiptools.lib.logging_config import get_logger, setup_logging
from skiptools.lib.tool_filter import SkipTools
from skiptools.models.filter import FilterResult
from skiptools.models.tool import ParsedTool

logger = get_logger(__name__)


def _tool_summary(tool: ParsedTool) -> dict[str, Any]:
    """Build the serializable view of a tool used for output."""
    return {
        "name": tool.name,
        "description": tool.clean_description,
        "keywords": tool.config.keywords if tool.config else None,
        "depends_on": tool.config.depends_on if tool.config else None,
    }


def _echo_result(result: FilterResult) -> None:
    """Print a filter result in readable form."""
    click.secho(
        f"Selected {result.filtered_count} of {result.total_original_count} tools",
        bold=True,
    )
    click.echo(f"Reason: {result.reason}")
    click.echo(f"Messages processed: {result.messages_processed}")
    for tool in result.tools:
        click.echo(f"  - {tool.name}")


def _load_engine(tools_file: str) -> SkipTools:
    """Load a catalog from disk and build the engine over it."""
    loader = ToolCatalogLoader()
    tools = loader.load_tools(tools_file)
    logger.debug(f"Building engine over {len(tools)} tools from {tools_file}")
    return SkipTools(tools)


@click.command(name="filter")
@click.argument("tools_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--messages",
    "-m",
    "messages_file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML/JSON file holding the conversation messages",
)
@click.option(
    "--query",
    "-q",
    "query",
    help="Text appended to the conversation as a user message",
)
@click.option(
    "--max-tools",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of tools to return",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Output the result as JSON",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Only log warnings and errors",
)
def filter_cmd(
    tools_file: str,
    messages_file: str | None,
    query: str | None,
    max_tools: int | None,
    as_json: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Select the tools relevant to a conversation.

    TOOLS_FILE is the path to a tool catalog (YAML or JSON).

    \b
    EXAMPLES:

        Filter against a saved conversation:
            skiptools filter tools.yaml --messages chat.json

        Filter against a single question, at most 5 tools:
            skiptools filter tools.yaml --query "what's the weather?" -n 5
    """
    setup_logging(verbose=verbose, quiet=quiet)

    logger.info(
        f"Filter command invoked: tools={tools_file}, messages={messages_file}, "
        f"max_tools={max_tools}"
    )

    try:
        engine = _load_engine(tools_file)

        messages: list[dict[str, Any]] = []
        if messages_file:
            messages = ToolCatalogLoader().load_messages(messages_file)
        if query:
            messages.append({"role": "user", "content": query})

        result = engine.filter(messages=messages, max_tools=max_tools)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.secho("Error: Failed to load tool configuration", fg="red", err=True)
        click.echo(f"  {str(e)}", err=True)
        sys.exit(1)
    except SkipToolsError as e:
        logger.error(f"Error: {e}", exc_info=True)
        click.secho(f"Error: {str(e)}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        payload = {
            "tools": [_tool_summary(tool) for tool in result.tools],
            "total_original_count": result.total_original_count,
            "filtered_count": result.filtered_count,
            "reason": result.reason,
            "messages_processed": result.messages_processed,
        }
        click.echo(json.dumps(payload, indent=2))
    else:
        _echo_result(result)


@click.command(name="tools")
@click.argument("tools_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Output the tools as JSON",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Only log warnings and errors",
)
def tools_cmd(tools_file: str, as_json: bool, verbose: bool, quiet: bool) -> None:
    """List the tools of a catalog with their parsed configuration.

    TOOLS_FILE is the path to a tool catalog (YAML or JSON). Warnings about
    unusable skip configurations are logged to stderr.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        engine = _load_engine(tools_file)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.secho("Error: Failed to load tool configuration", fg="red", err=True)
        click.echo(f"  {str(e)}", err=True)
        sys.exit(1)
    except SkipToolsError as e:
        logger.error(f"Error: {e}", exc_info=True)
        click.secho(f"Error: {str(e)}", fg="red", err=True)
        sys.exit(1)

    summaries = [_tool_summary(tool) for tool in engine.get_all_tools()]

    if as_json:
        click.echo(json.dumps(summaries, indent=2))
        return

    for summary in summaries:
        click.secho(summary["name"], bold=True)
        click.echo(f"  {summary['description']}")
        if summary["keywords"]:
            click.echo(f"  keywords: {', '.join(summary['keywords'])}")
        else:
            click.echo("  keywords: (always included)")
        if summary["depends_on"]:
            click.echo(f"  depends on: {', '.join(summary['depends_on'])}")
