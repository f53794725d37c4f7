"""Command line entry point for Appwrite Starter.

Asks for the project name, framework, template setup, Appwrite services,
endpoint and project ID (or takes them from flags), then scaffolds the
project into ``<output>/<name>``.
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError
from rich.prompt import Prompt

from .config import FRAMEWORKS, SERVICES, SETUPS, AppwriteConfig
from .scaffolder import ProjectConfig, ProjectGenerator, ScaffoldError
from .utils import (
    console,
    normalize_choice,
    parse_services,
    print_command,
    print_error,
    print_success,
    print_summary_table,
)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appwrite-starter",
        description="Create a new Vite project wired to an Appwrite backend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  appwrite-starter\n"
            "  appwrite-starter my-app --framework vuejs --setup basic\n"
            "  appwrite-starter my-app --services account,storage -o ./projects\n"
        ),
    )
    parser.add_argument("name", nargs="?", help="Project name (prompted if omitted)")
    parser.add_argument("--framework", help=f"One of: {', '.join(FRAMEWORKS.values())}")
    parser.add_argument("--setup", help=f"One of: {', '.join(SETUPS.values())}")
    parser.add_argument(
        "--services",
        help=f"Comma-separated Appwrite services: {', '.join(SERVICES.values())}",
    )
    parser.add_argument("--endpoint", help="Appwrite endpoint (default: $APPWRITE_ENDPOINT)")
    parser.add_argument("--project", help="Appwrite project ID (default: $APPWRITE_PROJECT)")
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("."),
        help="Directory in which the project folder is created (default: .)",
    )
    return parser


# ---------------------------------------------------------------------------
# Interactive questions
# ---------------------------------------------------------------------------


def _ask_choice(question: str, options: dict[str, str]) -> str:
    labels = list(options.values())
    answer = Prompt.ask(question, choices=labels, default=labels[0], console=console)
    return normalize_choice(answer)


def _ask_services() -> list[str]:
    labels = ", ".join(SERVICES.values())
    while True:
        answer = Prompt.ask(
            f"Which Appwrite services do you intend to use ({labels})",
            default="",
            console=console,
        )
        services = parse_services(answer)
        unknown = [service for service in services if service not in SERVICES]
        if not unknown:
            return services
        print_error(f"Unknown service(s): {', '.join(unknown)}")


def collect_answers(args: argparse.Namespace) -> ProjectConfig:
    """Build the ``ProjectConfig``, prompting for anything not given as a flag."""
    env = AppwriteConfig.from_env()

    name = args.name or Prompt.ask("Project name?", console=console)
    framework = args.framework or _ask_choice("Select a framework", FRAMEWORKS)
    setup = args.setup or _ask_choice(
        "Do you want a basic or batteries-included template", SETUPS
    )
    services = parse_services(args.services) if args.services is not None else _ask_services()
    endpoint = args.endpoint or Prompt.ask(
        "Appwrite endpoint?", default=env.endpoint or None, console=console
    )
    project = args.project or Prompt.ask(
        "Appwrite project id?", default=env.project or None, console=console
    )

    return ProjectConfig(
        name=name,
        framework=framework,
        setup=setup,
        services=services,
        endpoint=endpoint or "",
        project=project or "",
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``appwrite-starter``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = collect_answers(args)
    except ValidationError as exc:
        for error in exc.errors():
            print_error(f"Error: {error['msg']}")
        return 1

    project_dir = args.output / config.name
    console.print(f"\nCreating a new project in [green]{project_dir}[/green].\n")

    generator = ProjectGenerator(config)
    try:
        project_root = asyncio.run(generator.generate(args.output))
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        return 1
    except OSError as exc:
        print_error(f"Error: cannot write {exc.filename or project_dir}: {exc.strerror or exc}")
        return 1

    print_summary_table(
        {
            "Project": str(project_root),
            "Template": f"{FRAMEWORKS[config.framework]} / {SETUPS[config.setup]}",
            "Services": ", ".join(SERVICES[s] for s in config.services) or "-",
            "Endpoint": config.endpoint or "-",
        },
        title="Appwrite Starter",
    )
    print_success("Your project has been created. Now run:")
    print_command(f"cd {project_root}")
    print_command("npm install")
    print_command("npm run dev")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
