#!/usr/bin/env python3
"""Batch route and render all example definitions to SVG and PNG.

Outputs go to /tmp/cable_router_renders/.

Usage:
    python scripts/render_examples.py [--theme dark] [--highlight CABLE_ID]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from cable_router.cli import validate_graph  # noqa: E402
from cable_router.layout import route_graph  # noqa: E402
from cable_router.parser import load_records, parse_cable_mermaid  # noqa: E402
from cable_router.render import render_svg  # noqa: E402
from cable_router.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/cable_router_renders")
EXAMPLES_DIR = project_root / "examples"

EXAMPLE_FILES = sorted(
    [*EXAMPLES_DIR.glob("*.mmd"), *EXAMPLES_DIR.glob("*.json")]
)


def render_file(
    path: Path,
    output_dir: Path,
    *,
    theme_name: str = "light",
    highlight: str | None = None,
) -> tuple[str, list[str]]:
    """Parse, route, and render one example to SVG (and optionally PNG).

    Returns (name, list_of_issues).
    """
    name = path.stem
    issues: list[str] = []

    try:
        text = path.read_text()
        if path.suffix == ".json":
            graph = load_records(json.loads(text))
        else:
            graph = parse_cable_mermaid(text)
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"]

    issues.extend(f"invalid: {err}" for err in validate_graph(graph))

    try:
        cables = route_graph(graph)
        svg_str = render_svg(
            graph, THEMES[theme_name], cables=cables, highlight=highlight
        )
    except Exception as e:
        return name, [f"RENDER ERROR: {e}"]

    svg_path = output_dir / f"{name}.svg"
    svg_path.write_text(svg_str)

    # Try PNG conversion via cairosvg (optional)
    try:
        import cairosvg

        png_path = output_dir / f"{name}.png"
        cairosvg.svg2png(bytestring=svg_str.encode(), write_to=str(png_path), scale=2)
    except ImportError:
        issues.append("cairosvg not available, skipping PNG")
    except Exception as e:
        issues.append(f"PNG conversion error: {e}")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render cable examples")
    parser.add_argument(
        "--theme", choices=sorted(THEMES), default="light", help="Visual theme"
    )
    parser.add_argument(
        "--highlight", default=None, help="Cable id to draw at full strength"
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    print(f"Rendering {len(EXAMPLE_FILES)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in EXAMPLE_FILES)
    any_errors = False

    for path in EXAMPLE_FILES:
        name, issues = render_file(
            path, OUTPUT_DIR, theme_name=args.theme, highlight=args.highlight
        )
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
