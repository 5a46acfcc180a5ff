"""
Export functionality for graph layouts.

Example usage:
    from planarity_lab import Session
    from planarity_lab.export import to_svg

    session = Session(size=(800, 600))
    session.load_graph("cube")

    with open("cube.svg", "w") as f:
        f.write(to_svg(session.graph, session.get_crossings(), size=session.size))
"""

from .svg import to_svg

__all__ = ["to_svg"]
