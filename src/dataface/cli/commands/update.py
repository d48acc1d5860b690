"""Command to update an installed component to the registry's latest version."""

from pathlib import Path

import click

from dataface.cli.commands.add import add_component
from dataface.cli.error_boundary import cli_error_boundary
from dataface.cli.output import user_output
from dataface.core.config import load_config
from dataface.core.context import DatafaceContext
from dataface.core.errors import BackupFailedError, ComponentNotInstalledError
from dataface.core.installer import resolve_component_dir
from dataface.core.versioning import backup_component, get_installed_component_version


@click.command("update")
@click.argument("component")
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    help="The working directory. Defaults to the current directory.",
)
@click.option("--path", "target_dir", help="The directory the component was added to.")
@click.option("--force", is_flag=True, help="Skip confirmation prompts.")
@click.pass_obj
@cli_error_boundary
def update_cmd(
    ctx: DatafaceContext,
    component: str,
    cwd: Path | None,
    target_dir: str | None,
    force: bool,
) -> None:
    """Update a component to the latest version.

    The installed copy is backed up to .dataface/backups before it is
    overwritten.
    """
    project_root = cwd if cwd is not None else ctx.cwd
    config = load_config(project_root)
    latest = ctx.registry.get_component_info(component)

    component_dir = resolve_component_dir(project_root, component, config, target_dir)
    if not component_dir.exists():
        raise ComponentNotInstalledError(component)

    current = get_installed_component_version(component, component_dir)
    if current is None:
        ctx.feedback.warning(
            f"Could not determine the current version of {component}. "
            "It may have been modified or added manually."
        )
        if not force and not click.confirm(
            f"Do you want to update {component} anyway?", default=False
        ):
            return
    elif current == latest.version:
        ctx.feedback.success(f"Component {component} is already up to date (v{current}).")
        return
    else:
        user_output(f"Updating {component} from v{current} to v{latest.version}")

    if not force and not click.confirm(
        "This will overwrite any customizations you have made. Continue?", default=False
    ):
        return

    try:
        backup_dir = backup_component(project_root, component, component_dir, ctx.time)
    except BackupFailedError as e:
        ctx.feedback.error(str(e))
        if not force and not click.confirm(
            "Failed to create backup. Continue anyway?", default=False
        ):
            return
    else:
        ctx.feedback.success(f"Backed up {component} to {backup_dir}")

    add_component(
        ctx,
        component,
        project_root=project_root,
        target_dir=target_dir,
        overwrite=True,
    )
    ctx.feedback.success(f"✓ Updated {component} to v{latest.version}")
