"""Command-line boundary for go-initializer.

Reads a generate request (the same JSON the web UI posts), validates and
defaults it, then either previews the file list or writes the project.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from goinit.config import Config
from goinit.request import GenerateRequest
from goinit.scaffolder import FileSystemTemplateSource, ProjectGenerator, RenderError
from goinit.utils import (
    console,
    format_size,
    load_json,
    print_error,
    print_file_table,
    print_success,
    sanitize_name,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goinit",
        description="go-initializer -- scaffold a Go service from a JSON request",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  goinit request.json\n"
            "  goinit request.json --preview\n"
            "  goinit request.json -o ./out --extract\n"
        ),
    )
    parser.add_argument("request", help="Path to the generate request JSON file")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: ./output or GOINIT_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Only list the files that would be generated",
    )
    parser.add_argument(
        "--extract",
        action="store_true",
        help="Write the project tree instead of a zip archive",
    )
    parser.add_argument(
        "--templates",
        default=None,
        help="Template directory (default: packaged templates)",
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    args = build_parser().parse_args(argv)
    settings = Config.from_env()
    if args.output:
        settings.output_dir = Path(args.output)
    if args.templates:
        settings.template_dir = Path(args.templates)

    req_path = Path(args.request)
    if not req_path.exists():
        print_error(f"Request file not found: {req_path}")
        return 1

    try:
        request = GenerateRequest.model_validate(load_json(req_path))
    except ValidationError as exc:
        print_error(f"Invalid request: {escape(str(exc))}")
        return 1
    except ValueError as exc:
        # JSONDecodeError, or a top level that is not an object
        print_error(f"Invalid request JSON: {escape(str(exc))}")
        return 1

    config = request.to_project_config(settings)
    generator = ProjectGenerator(
        config, source=FileSystemTemplateSource(settings.template_dir)
    )

    if args.preview:
        print_file_table(generator.file_list(), title=f"{config.project_name} ({generator.structure})")
        return 0

    try:
        if args.extract:
            root = asyncio.run(generator.generate(settings.output_dir))
            print_success(f"Project written to {root}")
        else:
            archive = settings.output_dir / f"{sanitize_name(config.project_name, 'project')}.zip"
            path = asyncio.run(generator.write_archive(archive))
            console.print(f"[dim]{format_size(path.stat().st_size)}[/dim]")
            print_success(f"Archive written to {path}")
    except RenderError as exc:
        print_error(f"Failed to generate project: {escape(str(exc))}")
        return 1
    return 0


def main() -> None:
    """CLI entry point for ``goinit`` / ``python -m goinit.cli``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
