#!/usr/bin/env python3
"""
HTML/SVG showcase of the planarity playground.

Renders every catalog family at its generated layout, then plays each
guided solution step by step, and writes the snapshots to one HTML page.
Crossing edges are drawn in red with a marker at each crossing point.

Usage:
    uv run python scripts/showcase.py

Output:
    build/showcase.html
"""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path

from planarity_lab import GraphFamily, Session
from planarity_lab.export import to_svg

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"

# Canvas used for every snapshot
CANVAS_SIZE = (400, 350)


def snapshot_card(session: Session, caption: str) -> str:
    """Render the session's current layout as a captioned SVG card."""
    crossings = session.get_crossings()
    svg = to_svg(
        session.graph,
        crossings,
        size=session.size,
        vertex_radius=session.vertex_radius * 0.6,
        font_size=11,
    )
    status = f"{len(crossings)} crossing{'s' if len(crossings) != 1 else ''}"
    return (
        '                <div class="graph-card">\n'
        f"{svg}\n"
        f"                    <p><strong>{escape(caption)}</strong><br>{escape(status)}</p>\n"
        "                </div>"
    )


def family_section(session: Session, family: GraphFamily) -> tuple[str, list[str]]:
    """Snapshots of one family: generated layout plus any guided steps."""
    session.load_graph(family)
    cards = [snapshot_card(session, "Generated layout")]

    info = session.start_guided()
    while info is not None:
        cards.append(snapshot_card(session, str(info)))
        if info.is_last:
            break
        info = session.next_step()
    session.exit_guided()

    report = session.check_planarity()
    print(f"  {family.display_name}: {report.outcome.value} - {report.message}")
    return family.display_name, cards


def generate_html(sections: list[tuple[str, list[str]]]) -> str:
    """Generate HTML page with all snapshots."""
    html_parts = [
        """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Planarity Playground Showcase</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #f5f5f5;
            color: #333;
            margin: 0;
        }
        header {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            padding: 2rem;
            text-align: center;
        }
        main {
            max-width: 1400px;
            margin: 0 auto;
            padding: 2rem;
        }
        section h2 {
            color: #667eea;
            border-bottom: 2px solid #667eea;
            padding-bottom: 0.5rem;
        }
        .graph-grid {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(320px, 1fr));
            gap: 1.5rem;
        }
        .graph-card {
            background: white;
            border-radius: 8px;
            padding: 0.5rem;
            box-shadow: 0 2px 8px rgba(0,0,0,0.1);
        }
        .graph-card svg {
            display: block;
            width: 100%;
            height: auto;
        }
        .graph-card p {
            margin: 0.5rem;
            font-size: 0.85rem;
        }
    </style>
</head>
<body>
    <header>
        <h1>Planarity Playground Showcase</h1>
        <p>Catalog graphs at their generated layouts and along their guided solutions</p>
    </header>
    <main>
"""
    ]

    for section_title, cards in sections:
        html_parts.append(f"        <section>\n            <h2>{escape(section_title)}</h2>")
        html_parts.append('            <div class="graph-grid">')
        html_parts.extend(cards)
        html_parts.append("            </div>\n        </section>")

    html_parts.append(
        """    </main>
</body>
</html>"""
    )

    return "\n".join(html_parts)


def main() -> None:
    """Generate the showcase HTML."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    BUILD_DIR.mkdir(exist_ok=True)

    session = Session(size=CANVAS_SIZE, vertex_count=8, edge_density=0.3, random_seed=42)

    sections = []
    for family in GraphFamily:
        print(f"\nProcessing: {family.display_name}")
        sections.append(family_section(session, family))

    output_path = BUILD_DIR / "showcase.html"
    output_path.write_text(generate_html(sections), encoding="utf-8")
    print(f"\nShowcase saved to: {output_path.absolute()}")


if __name__ == "__main__":
    main()
