"""Command-line interface for notemark.

Render a Markdown note to HTML, JSON, Markdown, or a printed node tree.

Examples
--------
Render to an HTML fragment on stdout:
    $ notemark note.md

Write a standalone HTML page:
    $ notemark note.md --standalone --title "My note" --out note.html

Read from stdin and print the node tree:
    $ cat note.md | notemark - --format tree --rich

Use environment variables for defaults:
    $ export NOTEMARK_FORMAT=json
    $ export NOTEMARK_HEADING_IDS=true
    $ notemark note.md
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from notemark import __version__
from notemark.api import parse_file
from notemark.ast import Node
from notemark.constants import ENV_PREFIX
from notemark.exceptions import DependencyError, FileError, NotemarkError, RenderingError, ValidationError
from notemark.logging_utils import configure_logging
from notemark.options import HtmlRendererOptions, JsonRendererOptions, MarkdownParserOptions, MarkdownRendererOptions
from notemark.renderers.base import BaseRenderer
from notemark.renderers.html import HtmlRenderer
from notemark.renderers.json import JsonRenderer
from notemark.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7

OUTPUT_FORMATS = ("html", "json", "markdown", "tree")
TRUE_VALUES = ("true", "1", "yes", "on")


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with the NOTEMARK_ prefix.

    Parameters
    ----------
    key : str
        The argument dest (e.g., 'heading_ids')

    """
    env_key = f"{ENV_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply NOTEMARK_* environment variables as defaults to optional arguments.

    Command-line arguments still take precedence. Invalid values are
    logged and ignored.

    """
    for action in parser._actions:
        if not action.option_strings or action.dest in ("help", "version"):
            continue

        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        env_key = f"{ENV_PREFIX}{action.dest.upper()}"
        if isinstance(action, argparse._StoreTrueAction):
            action.default = env_value.lower() in TRUE_VALUES
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logger.warning("Invalid choice for %s: %s. Choices: %s", env_key, env_value, list(action.choices))
        elif action.type is int:
            try:
                action.default = int(env_value)
            except ValueError:
                logger.warning("Invalid integer value for %s: %s", env_key, env_value)
        else:
            action.default = env_value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with environment variable defaults applied."""
    parser = argparse.ArgumentParser(
        prog="notemark",
        description="Render Markdown notes to HTML, JSON, Markdown or a node tree.",
        epilog=f"Any option can also be set with an environment variable, e.g. {ENV_PREFIX}FORMAT=json.",
    )
    parser.add_argument("input", help="Markdown file to read, or '-' for stdin")
    parser.add_argument("--format", "-f", choices=OUTPUT_FORMATS, default="html", help="Output format (default: html)")
    parser.add_argument("--out", "-o", help="Output file (default: stdout)")

    html_group = parser.add_argument_group("HTML options")
    html_group.add_argument("--standalone", action="store_true", help="Wrap output in a complete HTML document")
    html_group.add_argument("--title", help="Document title for standalone output")
    html_group.add_argument("--template", help="Jinja2 template for standalone output (requires jinja2)")
    html_group.add_argument("--heading-ids", action="store_true", help="Add slug id attributes to headings")
    html_group.add_argument("--wrap-lists", action="store_true", help="Group consecutive list items into <ul>/<ol>")

    json_group = parser.add_argument_group("JSON options")
    json_group.add_argument("--indent", type=int, help="Indentation for JSON output")

    parser.add_argument("--options-json", help="JSON file with option values (command-line flags take precedence)")
    parser.add_argument("--rich", action="store_true", help="Use rich formatting for tree output")

    log_group = parser.add_argument_group("Logging")
    log_group.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log messages to this file")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")

    apply_env_vars_to_parser(parser)
    return parser


def load_options_from_json(json_file_path: str) -> dict[str, Any]:
    """Load option values from a JSON object file.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, is not valid JSON, or is not an object

    """
    json_path = Path(json_file_path)
    if not json_path.is_file():
        raise argparse.ArgumentTypeError(f"Options JSON file does not exist: {json_file_path}")

    try:
        options = json.loads(json_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in options file {json_file_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading options file {json_file_path}: {e}") from e

    if not isinstance(options, dict):
        raise argparse.ArgumentTypeError(
            f"Options JSON file must contain a JSON object, got {type(options).__name__}"
        )
    return options


def build_renderer(parsed_args: argparse.Namespace, json_options: dict[str, Any]) -> BaseRenderer:
    """Create the renderer for the requested output format.

    Raises
    ------
    ValueError
        If an option value is out of range

    """
    if parsed_args.format == "json":
        json_opts = JsonRendererOptions.from_dict(json_options)
        if parsed_args.indent is not None:
            json_opts = json_opts.create_updated(indent=parsed_args.indent)
        return JsonRenderer(json_opts)

    if parsed_args.format == "markdown":
        return MarkdownRenderer(MarkdownRendererOptions.from_dict(json_options))

    html_opts = HtmlRendererOptions.from_dict(json_options)
    overrides: dict[str, Any] = {}
    if parsed_args.standalone:
        overrides["standalone"] = True
    if parsed_args.title:
        overrides["title"] = parsed_args.title
    if parsed_args.template:
        overrides["template_file"] = parsed_args.template
    if parsed_args.heading_ids:
        overrides["heading_ids"] = True
    if parsed_args.wrap_lists:
        overrides["wrap_list_items"] = True
    return HtmlRenderer(html_opts.create_updated(**overrides) if overrides else html_opts)


def _node_label(node: Node) -> str:
    label = node.type
    if node.attributes:
        label += " " + " ".join(f"{key}={value!r}" for key, value in node.attributes.items())
    if node.content is not None:
        label += f" {node.content!r}"
    return label


def format_tree(nodes: Sequence[Node]) -> str:
    """Format nodes as an indented plain-text tree."""
    lines: list[str] = []

    def add(node: Node, depth: int) -> None:
        lines.append(f"{'  ' * depth}{_node_label(node)}")
        for child in node.children or ():
            add(child, depth + 1)

    for node in nodes:
        add(node, 0)
    return "\n".join(lines) + "\n"


def print_rich_tree(nodes: Sequence[Node], title: str) -> None:
    """Print nodes as a rich tree to stdout."""
    from rich.console import Console
    from rich.markup import escape
    from rich.tree import Tree

    def add(branch: Tree, node: Node) -> None:
        child_branch = branch.add(escape(_node_label(node)))
        for child in node.children or ():
            add(child_branch, child)

    tree = Tree(f"[bold]{escape(title)}[/bold]")
    for node in nodes:
        add(tree, node)
    Console().print(tree)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code."""
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def main(args: list[str] | None = None) -> int:
    """Run the notemark command line and return an exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        json_options = load_options_from_json(parsed_args.options_json) if parsed_args.options_json else {}
        parser_options = MarkdownParserOptions.from_dict(json_options)
        renderer = build_renderer(parsed_args, json_options)
    except (argparse.ArgumentTypeError, TypeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        nodes = parse_file(parsed_args.input, parser_options)

        if parsed_args.format == "tree" and parsed_args.rich and not parsed_args.out:
            print_rich_tree(nodes, "<stdin>" if parsed_args.input == "-" else parsed_args.input)
            return EXIT_SUCCESS

        output = format_tree(nodes) if parsed_args.format == "tree" else renderer.render_to_string(nodes)

        if parsed_args.out:
            BaseRenderer.write_text_output(output, parsed_args.out)
            logger.info("Wrote %s output to %s", parsed_args.format, parsed_args.out)
        else:
            sys.stdout.write(output)
    except NotemarkError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
