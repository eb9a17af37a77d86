#!/usr/bin/env python3
"""
shaderpp CLI

Resolves `#pragma use "file"` directives in shader sources and writes the
dependency-ordered result: the flattened source, the file list, or the
include graph.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from graph.model import IncludeGraph
from preprocessor.config import OUTPUT_FORMATS, Config, ConfigError, load_config, normalize_extensions
from preprocessor.discovery import expand_roots
from preprocessor.resolver import resolve_includes
from exporters import to_source, to_list, to_json, to_mermaid, to_ascii


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="shaderpp",
        description="Resolve #pragma use directives into one dependency-ordered source.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shaderpp main.frag                   # Flattened source on stdout
  shaderpp main.frag -o out.frag       # Flattened source to a file
  shaderpp main.frag -f list           # Resolved files, dependencies first
  shaderpp shaders/ -f mermaid         # Include graph of every shader in a directory
  shaderpp -c shaderpp.yaml            # Roots and options from a config file
        """,
    )

    parser.add_argument(
        "roots",
        nargs="*",
        help="Root shader files or directories",
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Configuration file (.yaml, .yml, .json or .toml)",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: source)",
    )

    # Flattening options
    parser.add_argument(
        "--strip-directives",
        action="store_true",
        default=None,
        help="Blank out #pragma use lines in flattened output",
    )

    parser.add_argument(
        "--line-markers",
        action="store_true",
        default=None,
        help="Emit a '// file: <path>' comment before each file",
    )

    # Discovery options
    parser.add_argument(
        "--include-ext",
        nargs="+",
        default=None,
        help="File extensions to pick up from directory roots (e.g., .glsl .frag)",
    )

    # Graph display options
    parser.add_argument(
        "--relative-to",
        type=str,
        default=None,
        help="Base path for relative path display (default: current directory)",
    )

    parser.add_argument(
        "--orientation",
        choices=["LR", "TD", "TB", "RL", "BT"],
        default="LR",
        help="Mermaid flowchart orientation (default: LR)",
    )

    parser.add_argument(
        "--ascii-style",
        choices=["tree", "ascii"],
        default="tree",
        help="ASCII output style: 'tree' (Unicode) or 'ascii' (pure ASCII)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every file as it is resolved",
    )

    return parser.parse_args(args)


def build_config(parsed) -> Config:
    """
    Merge the configuration file (if any) with command line arguments.

    Command line values take precedence over the configuration file.
    """
    config = load_config(Path(parsed.config)) if parsed.config else Config()

    if parsed.roots:
        config.roots = list(parsed.roots)
    if parsed.format is not None:
        config.format = parsed.format
    if parsed.output is not None:
        config.output = parsed.output
    if parsed.strip_directives is not None:
        config.strip_directives = parsed.strip_directives
    if parsed.line_markers is not None:
        config.line_markers = parsed.line_markers
    if parsed.include_ext:
        config.extensions = normalize_extensions(parsed.include_ext)

    return config


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(parsed)
    except (OSError, ConfigError) as e:
        print(f"Error reading config: {e}", file=sys.stderr)
        return 1

    if not config.roots:
        print("Error: no root files given", file=sys.stderr)
        return 1

    base: str = parsed.relative_to or "."

    # Resolve includes
    graph = IncludeGraph()
    try:
        roots: List[str] = expand_roots(config.roots, include_ext=config.extensions)
        files = resolve_includes(*roots, graph=graph)
    except (OSError, RecursionError) as e:
        print(f"Error resolving includes: {e}", file=sys.stderr)
        return 1

    # Generate output
    try:
        if config.format == "list":
            output = to_list(files, base=base)
        elif config.format == "json":
            output = to_json(files, graph, base=base)
        elif config.format == "mermaid":
            output = to_mermaid(graph, base=base, orientation=parsed.orientation)
        elif config.format == "ascii":
            output = to_ascii(graph, base=base, style=parsed.ascii_style)
        else:  # source (default)
            output = to_source(
                files,
                strip=config.strip_directives,
                line_markers=config.line_markers,
            )
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error generating output: {e}", file=sys.stderr)
        return 1

    # Write output
    if config.output:
        try:
            output_path = Path(config.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    elif config.format == "source":
        sys.stdout.write(output)
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
