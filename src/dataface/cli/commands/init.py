"""Command to initialize a project for dataface components."""

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from dataface.cli.error_boundary import cli_error_boundary
from dataface.cli.output import user_output
from dataface.core.config import STYLES, Style, config_exists, create_config, write_config
from dataface.core.context import DatafaceContext
from dataface.core.installer import install_dependencies
from dataface.core.project import (
    ProjectType,
    default_css_path,
    detect_project_type,
    detect_rsc,
    detect_typescript,
)
from dataface.core.tailwind import setup_tailwind
from dataface.core.transform import strip_types

logger = logging.getLogger(__name__)

BASE_COLORS = ("slate", "gray", "zinc", "neutral", "stone")

UTILS_PACKAGES = ["clsx", "tailwind-merge"]

UTILS_SOURCE = """\
import { type ClassValue, clsx } from "clsx";
import { twMerge } from "tailwind-merge";

export function cn(...inputs: ClassValue[]) {
  return twMerge(clsx(inputs));
}
"""


@dataclass(frozen=True)
class InitAnswers:
    """Choices made during init, either prompted or detected."""

    typescript: bool
    rsc: bool
    style: Style
    tailwind: bool
    base_color: str
    css_variables: bool
    components_dir: str
    utils_dir: str


def default_answers(*, typescript: bool, rsc: bool, tailwind: bool) -> InitAnswers:
    return InitAnswers(
        typescript=typescript,
        rsc=rsc,
        style="default",
        tailwind=tailwind,
        base_color="slate",
        css_variables=True,
        components_dir="components",
        utils_dir="lib/utils",
    )


def prompt_answers(*, typescript: bool, rsc: bool) -> InitAnswers:
    """Ask the interactive init questions, defaulting to detected values."""
    use_typescript = click.confirm("Does your project use TypeScript?", default=typescript)
    use_rsc = click.confirm("Are you using React Server Components?", default=rsc)
    style = click.prompt(
        "Which style would you like to use?",
        type=click.Choice(STYLES),
        default="default",
    )
    use_tailwind = click.confirm("Would you like to set up Tailwind CSS?", default=True)
    base_color = "slate"
    css_variables = True
    if use_tailwind:
        base_color = click.prompt(
            "Which color would you like to use as the base color?",
            type=click.Choice(BASE_COLORS),
            default="slate",
        )
        css_variables = click.confirm(
            "Would you like to use CSS variables for colors?", default=True
        )
    components_dir = click.prompt("Where is your components directory?", default="components")
    utils_dir = click.prompt("Where is your utils directory?", default="lib/utils")

    return InitAnswers(
        typescript=use_typescript,
        rsc=use_rsc,
        style=style,
        tailwind=use_tailwind,
        base_color=base_color,
        css_variables=css_variables,
        components_dir=components_dir,
        utils_dir=utils_dir,
    )


def write_utils(ctx: DatafaceContext, project_root: Path, answers: InitAnswers) -> None:
    """Create the `cn` helper and install its packages when the utils dir is new."""
    utils_dir = project_root / answers.utils_dir
    if utils_dir.exists():
        logger.debug("Utils directory %s exists, leaving it alone", utils_dir)
        return

    utils_dir.mkdir(parents=True)
    if answers.typescript:
        filename, content = "utils.ts", UTILS_SOURCE
    else:
        filename, content = "utils.js", strip_types(UTILS_SOURCE)
    (utils_dir / filename).write_text(content, encoding="utf-8")
    ctx.feedback.success(f"✓ Created {answers.utils_dir}/{filename}")

    install_dependencies(
        UTILS_PACKAGES,
        project_root=project_root,
        package_manager=ctx.package_manager,
        feedback=ctx.feedback,
    )


@click.command("init")
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    help="The working directory. Defaults to the current directory.",
)
@click.option("--yes", "-y", is_flag=True, help="Skip prompts and use detected defaults.")
@click.option("--tailwind", is_flag=True, help="Install and configure Tailwind CSS.")
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: DatafaceContext, cwd: Path | None, yes: bool, tailwind: bool) -> None:
    """Initialize your project with dataface.

    Writes components.json, optionally sets up Tailwind CSS, and creates the
    `cn` class-name helper.
    """
    project_root = cwd if cwd is not None else ctx.cwd

    if config_exists(project_root) and not yes:
        if not click.confirm("components.json already exists. Overwrite?", default=False):
            user_output(click.style("Initialization cancelled.", fg="yellow"))
            return

    project_type: ProjectType = detect_project_type(project_root)
    typescript = detect_typescript(project_root)
    rsc = detect_rsc(project_root)
    user_output(f"Project type: {click.style(project_type, fg='cyan')}")

    if yes:
        answers = default_answers(typescript=typescript, rsc=rsc, tailwind=tailwind)
    else:
        answers = prompt_answers(typescript=typescript, rsc=rsc)

    config = create_config(
        style=answers.style,
        rsc=answers.rsc,
        tsx=answers.typescript,
        tailwind_css=default_css_path(project_type),
        base_color=answers.base_color,
        css_variables=answers.css_variables,
        components_alias=f"@/{answers.components_dir}",
        utils_alias=f"@/{answers.utils_dir}",
    )
    write_config(project_root, config)
    ctx.feedback.success("✓ Created components.json")

    if answers.tailwind:
        setup_tailwind(
            config,
            project_root=project_root,
            package_manager=ctx.package_manager,
            feedback=ctx.feedback,
        )
        ctx.feedback.success("✓ Set up Tailwind CSS")

    write_utils(ctx, project_root, answers)

    user_output()
    ctx.feedback.success("✓ dataface has been initialized!")
    user_output()
    user_output(f"Run {click.style('dataface add button', fg='cyan')} to add your first component.")
    user_output()
