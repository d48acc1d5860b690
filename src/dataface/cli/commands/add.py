"""Command to add registry components to the project."""

import logging
from pathlib import Path

import click

from dataface.cli.error_boundary import cli_error_boundary
from dataface.cli.output import user_output
from dataface.core.config import ProjectConfig, load_config
from dataface.core.context import DatafaceContext
from dataface.core.errors import ComponentNotFoundError
from dataface.core.installer import (
    InstallReport,
    alias_to_directory,
    install_dependencies,
    write_component_files,
)
from dataface.core.transform import transform_files

logger = logging.getLogger(__name__)


def component_export_name(component: str) -> str:
    """Export name used in the import hint: "dropdown-menu" -> "DropdownMenu"."""
    return "".join(part[:1].upper() + part[1:] for part in component.split("-") if part)


def import_hint(component: str, config: ProjectConfig, target_dir: str | None = None) -> str:
    base = target_dir if target_dir else alias_to_directory(config.aliases.components)
    import_path = f"{base.rstrip('/')}/{component}"
    return f'import {{ {component_export_name(component)} }} from "{import_path}"'


def add_component(
    ctx: DatafaceContext,
    component: str,
    *,
    project_root: Path,
    target_dir: str | None,
    overwrite: bool,
) -> InstallReport:
    """Fetch, transform and install one component with its dependencies.

    Shared by `add` and `update`. Files already written stay in place when
    dependency installation fails.

    Raises:
        ConfigMissingError, ConfigInvalidError: If components.json is unusable
        ComponentNotFoundError: If the component is not in the registry
        ComponentUnavailableError: If no fetch strategy could retrieve it
    """
    config = load_config(project_root)

    if not ctx.registry.check_component_exists(component):
        raise ComponentNotFoundError(component)

    ctx.feedback.info(f"Adding {component} component...")
    files = ctx.fetcher.fetch_component_files(component, config)
    logger.debug("Fetched %d file(s) for %s", len(files), component)

    report = write_component_files(
        component,
        transform_files(files, config),
        config,
        project_root=project_root,
        feedback=ctx.feedback,
        target_dir=target_dir,
        overwrite=overwrite,
    )

    install_dependencies(
        ctx.registry.resolve_component_dependencies(component),
        project_root=project_root,
        package_manager=ctx.package_manager,
        feedback=ctx.feedback,
    )

    ctx.feedback.success(f"✓ Successfully added {component} component")
    user_output()
    user_output("Use the component in your project:")
    user_output()
    user_output(click.style(import_hint(component, config, target_dir), fg="bright_black"))
    user_output()
    return report


@click.command("add")
@click.argument("components", nargs=-1, required=True)
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    help="The working directory. Defaults to the current directory.",
)
@click.option("--path", "target_dir", help="The directory to add the component to.")
@click.option("--overwrite", is_flag=True, help="Overwrite existing files.")
@click.pass_obj
@cli_error_boundary
def add_cmd(
    ctx: DatafaceContext,
    components: tuple[str, ...],
    cwd: Path | None,
    target_dir: str | None,
    overwrite: bool,
) -> None:
    """Add components to your project.

    Components are installed in the order given; the first failure stops
    the command.

    Examples:
        dataface add button
        dataface add dialog card --path src/ui
    """
    project_root = cwd if cwd is not None else ctx.cwd
    for component in components:
        add_component(
            ctx,
            component,
            project_root=project_root,
            target_dir=target_dir,
            overwrite=overwrite,
        )
