"""CLI entrypoints for compdocs commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .config import CompDocsConfig, ConfigError, load_config
from .generation.examples import ExampleOptions
from .logging import configure_logging, get_logger
from .parsing.factory import ComponentParser
from .reporting.renderer import ReportRenderer
from .reporting.summaries import (
    FRAMEWORKS,
    SORT_KEYS,
    ReportError,
    analysis_to_dict,
    list_components,
    select_examples,
    validate_framework,
)


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_definitions_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "definitions",
        nargs="?",
        default=None,
        help="Path to the declaration file (defaults to `definitions` in .compdocs.yml).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compdocs",
        description="Inspect annotated component declarations and generate usage examples.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .compdocs.yml or the directory containing it.",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List components grouped by status.")
    _add_verbose_option(list_parser, suppress_default=True)
    _add_definitions_argument(list_parser)
    list_parser.add_argument("--status", default=None, help="Only show components with this status.")
    list_parser.add_argument("--category", default=None, help="Only show names containing this term.")
    list_parser.add_argument("--sort-by", choices=SORT_KEYS, default="name")
    list_parser.add_argument(
        "--brief",
        action="store_true",
        help="One line per component instead of full metadata.",
    )

    properties_parser = subparsers.add_parser(
        "properties", help="Show the properties of a component."
    )
    _add_verbose_option(properties_parser, suppress_default=True)
    properties_parser.add_argument("name", help="Component name, e.g. `button` or `Alert - expandable`.")
    _add_definitions_argument(properties_parser)
    properties_parser.add_argument("--no-description", action="store_true")
    properties_parser.add_argument(
        "--examples", action="store_true", help="Include example values per property."
    )

    examples_parser = subparsers.add_parser("examples", help="Generate usage examples.")
    _add_verbose_option(examples_parser, suppress_default=True)
    examples_parser.add_argument("name", help="Component name.")
    _add_definitions_argument(examples_parser)
    examples_parser.add_argument(
        "--type",
        dest="types",
        action="append",
        default=None,
        help="Example type to include (basic, state, accessibility, form, all). Repeatable.",
    )
    examples_parser.add_argument("--framework", choices=FRAMEWORKS, default=None)
    examples_parser.add_argument("--no-description", action="store_true")

    analyze_parser = subparsers.add_parser(
        "analyze", help="Print the semantic analysis of a component as JSON."
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    analyze_parser.add_argument("name", help="Component name.")
    _add_definitions_argument(analyze_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for compdocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)
    logger = get_logger("cli")

    try:
        config = load_config(Path(args.config))
        definitions = _resolve_definitions(args.definitions, config)
        component_parser = ComponentParser(config.interface_prefix, config.tag_prefix)
        renderer = ReportRenderer(config.templates_dir)
        logger.debug("Reading declarations from %s", definitions)

        if args.command == "list":
            summaries = list_components(
                component_parser.read_blocks(definitions),
                status=args.status,
                category=args.category,
                sort_by=args.sort_by,
            )
            print(renderer.render_component_list(summaries, include_metadata=not args.brief))
            return

        components = component_parser.parse_file(definitions)
        component = component_parser.find_component_by_name(args.name, components)
        if component is None:
            suggestions = component_parser.get_suggested_component_names(args.name, components)
            print(renderer.render_not_found(args.name, suggestions, components))
            parser.exit(1)

        if args.command == "properties":
            print(
                renderer.render_properties(
                    component,
                    include_description=not args.no_description,
                    include_examples=bool(args.examples),
                )
            )
        elif args.command == "examples":
            framework = validate_framework(args.framework or config.examples.framework)
            include_description = config.examples.include_description and not args.no_description
            requested = args.types or config.examples.types
            generated = component_parser.generate_examples(
                component,
                ExampleOptions(
                    framework=framework,
                    include_description=include_description,
                    example_types=list(requested),
                ),
            )
            print(
                renderer.render_examples(
                    component,
                    select_examples(generated, requested),
                    framework=framework,
                    include_description=include_description,
                )
            )
        elif args.command == "analyze":
            analysis = component_parser.analyze_component_semantics(component)
            payload = {"component": component.name, "tag_name": component.tag_name}
            payload.update(analysis_to_dict(analysis))
            print(json.dumps(payload, indent=2))
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (
        FileNotFoundError,
        IsADirectoryError,
        UnicodeDecodeError,
        ConfigError,
        ReportError,
    ) as exc:
        parser.exit(1, f"compdocs {args.command} failed: {exc}\n")


def _resolve_definitions(argument: Optional[str], config: CompDocsConfig) -> Path:
    if argument:
        return Path(argument)
    if config.definitions is not None:
        return config.definitions
    raise FileNotFoundError(
        "No declaration file given and no `definitions` entry in .compdocs.yml"
    )


if __name__ == "__main__":
    main(sys.argv[1:])
