"""Command to list the components available in the registry."""

import click
from rich.console import Console
from rich.table import Table

from dataface.cli.error_boundary import cli_error_boundary
from dataface.core.context import DatafaceContext
from dataface.core.registry.types import Registry


def build_component_table(registry: Registry) -> Table:
    """One section per category, in registry order, with the category display name."""
    table = Table(show_header=True, header_style="bold", box=None, title="Available components")
    table.add_column("component", style="green", no_wrap=True)
    table.add_column("description")

    for index, (category_name, components) in enumerate(
        registry.components_by_category().items()
    ):
        category = registry.find_category(category_name)
        display = category.display if category is not None else category_name
        if index > 0:
            table.add_row("", "")
        table.add_row(f"[bold cyan]{display}[/bold cyan]", "")
        for component in components:
            table.add_row(f"  {component.name}", component.description)

    return table


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: DatafaceContext) -> None:
    """List all available components."""
    registry = ctx.registry.get_registry()

    # Output table to stderr (consistent with user_output convention)
    console = Console(stderr=True, width=200)
    console.print(build_component_table(registry))
    console.print()
