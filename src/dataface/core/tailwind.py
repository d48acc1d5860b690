"""Tailwind CSS scaffolding used by `dataface init --tailwind`.

Only files that do not exist yet are created. A Tailwind config or stylesheet
already in the project is left untouched.
"""

import logging
from pathlib import Path

from dataface.core.config import ProjectConfig
from dataface.core.installer import install_dependencies
from dataface.core.package_manager.abc import PackageManager
from dataface.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

TAILWIND_PACKAGES = ["tailwindcss", "postcss", "autoprefixer"]

CONTENT_GLOBS = [
    "./pages/**/*.{js,jsx,ts,tsx}",
    "./components/**/*.{js,jsx,ts,tsx}",
    "./app/**/*.{js,jsx,ts,tsx}",
    "./src/**/*.{js,jsx,ts,tsx}",
]

_THEME_COLORS = [
    "primary",
    "secondary",
    "destructive",
    "muted",
    "accent",
    "popover",
    "card",
]

_CONTAINER = """\
    container: {
      center: true,
      padding: "2rem",
      screens: {
        "2xl": "1400px",
      },
    },"""

_EXTEND_TAIL = """\
      borderRadius: {
        lg: "var(--radius)",
        md: "calc(var(--radius) - 2px)",
        sm: "calc(var(--radius) - 4px)",
      },
      keyframes: {
        "accordion-down": {
          from: { height: 0 },
          to: { height: "var(--radix-accordion-content-height)" },
        },
        "accordion-up": {
          from: { height: "var(--radix-accordion-content-height)" },
          to: { height: 0 },
        },
      },
      animation: {
        "accordion-down": "accordion-down 0.2s ease-out",
        "accordion-up": "accordion-up 0.2s ease-out",
      },
    },"""

LIGHT_VARIABLES: dict[str, str] = {
    "background": "0 0% 100%",
    "foreground": "222.2 84% 4.9%",
    "card": "0 0% 100%",
    "card-foreground": "222.2 84% 4.9%",
    "popover": "0 0% 100%",
    "popover-foreground": "222.2 84% 4.9%",
    "primary": "222.2 47.4% 11.2%",
    "primary-foreground": "210 40% 98%",
    "secondary": "210 40% 96.1%",
    "secondary-foreground": "222.2 47.4% 11.2%",
    "muted": "210 40% 96.1%",
    "muted-foreground": "215.4 16.3% 46.9%",
    "accent": "210 40% 96.1%",
    "accent-foreground": "222.2 47.4% 11.2%",
    "destructive": "0 84.2% 60.2%",
    "destructive-foreground": "210 40% 98%",
    "border": "214.3 31.8% 91.4%",
    "input": "214.3 31.8% 91.4%",
    "ring": "222.2 84% 4.9%",
    "radius": "0.5rem",
}

DARK_VARIABLES: dict[str, str] = {
    "background": "222.2 84% 4.9%",
    "foreground": "210 40% 98%",
    "card": "222.2 84% 4.9%",
    "card-foreground": "210 40% 98%",
    "popover": "222.2 84% 4.9%",
    "popover-foreground": "210 40% 98%",
    "primary": "210 40% 98%",
    "primary-foreground": "222.2 47.4% 11.2%",
    "secondary": "217.2 32.6% 17.5%",
    "secondary-foreground": "210 40% 98%",
    "muted": "217.2 32.6% 17.5%",
    "muted-foreground": "215 20.2% 65.1%",
    "accent": "217.2 32.6% 17.5%",
    "accent-foreground": "210 40% 98%",
    "destructive": "0 62.8% 30.6%",
    "destructive-foreground": "210 40% 98%",
    "border": "217.2 32.6% 17.5%",
    "input": "217.2 32.6% 17.5%",
    "ring": "212.7 26.8% 83.9%",
}


def _extend_block() -> str:
    lines = ["      extend: {", "      colors: {"]
    for name in ("border", "input", "ring", "background", "foreground"):
        lines.append(f'        {name}: "hsl(var(--{name}))",')
    for name in _THEME_COLORS:
        lines.append(f"        {name}: {{")
        lines.append(f'          DEFAULT: "hsl(var(--{name}))",')
        lines.append(f'          foreground: "hsl(var(--{name}-foreground))",')
        lines.append("        },")
    lines.append("      },")
    # "extend: {" keeps the indentation of the line it replaces
    return "\n".join(lines).removeprefix("      ") + "\n" + _EXTEND_TAIL


def patch_tailwind_config(text: str) -> str:
    """Add dark mode, content globs, container and theme colors to a fresh config.

    Operates on the text generated by `tailwindcss init`; anchors that are not
    present are left alone.
    """
    content = "\n".join(
        ["content: ["] + [f"    '{glob}'," for glob in CONTENT_GLOBS] + ["  ],"]
    )
    return (
        text.replace("module.exports = {", 'module.exports = {\n  darkMode: ["class"],', 1)
        .replace("content: [],", content, 1)
        .replace("theme: {", "theme: {\n" + _CONTAINER, 1)
        .replace("extend: {},", _extend_block(), 1)
    )


def _variable_block(selector: str, variables: dict[str, str]) -> list[str]:
    lines = [f"  {selector} {{"]
    lines.extend(f"    --{name}: {value};" for name, value in variables.items())
    lines.append("  }")
    return lines


def render_globals_css(css_variables: bool) -> str:
    """Stylesheet with the Tailwind layers and, optionally, the theme variables."""
    lines = ["@tailwind base;", "@tailwind components;", "@tailwind utilities;", ""]
    if css_variables:
        lines.append("@layer base {")
        lines.extend(_variable_block(":root", LIGHT_VARIABLES))
        lines.append("")
        lines.extend(_variable_block(".dark", DARK_VARIABLES))
        lines.append("}")
        lines.append("")
    lines.extend(
        [
            "@layer base {",
            "  * {",
            "    @apply border-border;",
            "  }",
            "  body {",
            "    @apply bg-background text-foreground;",
            "  }",
            "}",
        ]
    )
    return "\n".join(lines) + "\n"


def setup_tailwind(
    config: ProjectConfig,
    *,
    project_root: Path,
    package_manager: PackageManager,
    feedback: UserFeedback,
) -> None:
    """Install Tailwind and create its config and stylesheet when missing.

    Raises:
        RuntimeError: If `tailwindcss init` fails
    """
    install_dependencies(
        TAILWIND_PACKAGES,
        project_root=project_root,
        package_manager=package_manager,
        feedback=feedback,
        dev=True,
    )

    config_path = project_root / config.tailwind.config
    if not config_path.exists():
        package_manager.run_npx(["tailwindcss", "init", "-p"], project_root)
        if config_path.exists():
            text = config_path.read_text(encoding="utf-8")
            config_path.write_text(patch_tailwind_config(text), encoding="utf-8")
            feedback.info(f"Created {config_path}")
        else:
            logger.warning("tailwindcss init did not create %s", config_path)

    css_path = project_root / config.tailwind.css
    if not css_path.exists():
        css_path.parent.mkdir(parents=True, exist_ok=True)
        css_path.write_text(render_globals_css(config.tailwind.css_variables), encoding="utf-8")
        feedback.info(f"Created {css_path}")
