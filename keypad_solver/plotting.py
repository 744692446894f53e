# keypad_solver/plotting.py
# Minimal matplotlib visualization: draw both keypads side by side in one figure,
# gap cell hatched, optional route arrows from one button to another.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import FancyArrowPatch, Rectangle

from .config import DEFAULTS
from .layout import button_at, gap_of, position_of, shape_of
from .routes import walk
from .types import KeypadKind, Position, Route


@dataclass(frozen=True)
class PlotStyle:
    show_labels: bool = True
    show_gap: bool = True
    font_size: int = DEFAULTS.plot_font_size
    key_color: Tuple[float, float, float] = (0.85, 0.88, 0.92)
    gap_color: Tuple[float, float, float] = (0.6, 0.6, 0.6)
    route_colors: Tuple[str, ...] = ("tab:red", "tab:blue", "tab:green", "tab:orange")


def _cell_center(pos: Position, rows: int) -> Tuple[float, float]:
    # Row 0 is the top row; matplotlib y grows upwards.
    return pos.col + 0.5, rows - pos.row - 0.5


def _draw_keypad(
    ax: plt.Axes,
    kind: KeypadKind,
    routes: Sequence[Tuple[str, Route]],
    style: PlotStyle,
) -> None:
    rows, cols = shape_of(kind)
    gap = gap_of(kind)

    for r in range(rows):
        for c in range(cols):
            pos = Position(r, c)
            x, y = c, rows - r - 1
            if pos == gap:
                if style.show_gap:
                    ax.add_patch(
                        Rectangle((x, y), 1, 1, facecolor=style.gap_color, hatch="//", edgecolor="black", linewidth=0.8)
                    )
                continue
            ax.add_patch(Rectangle((x, y), 1, 1, facecolor=style.key_color, edgecolor="black", linewidth=1.0))
            if style.show_labels:
                cx, cy = _cell_center(pos, rows)
                ax.text(cx, cy, button_at(kind, pos), ha="center", va="center", fontsize=style.font_size)

    for i, (source, route) in enumerate(routes):
        color = style.route_colors[i % len(style.route_colors)]
        start = position_of(kind, source)
        cells: List[Position] = [start] + list(walk(start, route))
        # Offset parallel routes slightly so they do not hide each other.
        off = 0.08 * (i - (len(routes) - 1) / 2)
        for a, b in zip(cells, cells[1:]):
            ax0, ay0 = _cell_center(a, rows)
            bx0, by0 = _cell_center(b, rows)
            ax.add_patch(
                FancyArrowPatch(
                    (ax0 + off, ay0 + off),
                    (bx0 + off, by0 + off),
                    arrowstyle="-|>",
                    mutation_scale=14,
                    color=color,
                    linewidth=1.6,
                )
            )

    ax.set_title(f"{kind.value} keypad", fontsize=10)
    ax.set_xlim(-0.2, cols + 0.2)
    ax.set_ylim(-0.2, rows + 0.2)
    ax.set_aspect("equal", adjustable="box")
    ax.tick_params(labelbottom=False, labelleft=False, bottom=False, left=False)


def plot_keypads(
    routes: Optional[Dict[KeypadKind, Sequence[Tuple[str, Route]]]] = None,
    style: Optional[PlotStyle] = None,
    figsize: Optional[Tuple[float, float]] = None,
) -> plt.Figure:
    """
    Draw the numeric and directional keypads in one figure.
    `routes` maps a keypad kind to (source button, route) pairs to draw as arrows.
    """
    style = style or PlotStyle()
    routes = routes or {}

    fig, axes = plt.subplots(1, 2, figsize=figsize or (8, 5))
    for ax, kind in zip(axes, (KeypadKind.NUMERIC, KeypadKind.DIRECTIONAL)):
        _draw_keypad(ax, kind, routes.get(kind, ()), style)

    fig.tight_layout()
    return fig


def show_keypads(
    routes: Optional[Dict[KeypadKind, Sequence[Tuple[str, Route]]]] = None,
    style: Optional[PlotStyle] = None,
) -> None:
    """Convenience wrapper: plot and show."""
    plot_keypads(routes, style=style)
    plt.show()


def save_keypads_png(
    path: str,
    routes: Optional[Dict[KeypadKind, Sequence[Tuple[str, Route]]]] = None,
    style: Optional[PlotStyle] = None,
    dpi: int = 150,
) -> None:
    """Save the keypad figure to PNG."""
    fig = plot_keypads(routes, style=style)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
