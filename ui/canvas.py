"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: array values (+ optional highlighted index)
→ SVG string.

    svg = render_bars([5, 3, 4, 1], highlight=1)

Each value is drawn as a bar standing on the bottom edge; the bar's
height is the value itself, so values generated for a canvas of
height H always fit.  The highlighted bar (the index the last applied
event touched) gets the accent colour.

SvgRenderer wraps render_bars into the renderer capability the
PlaybackController expects: it keeps the last frame so the web layer
can serve it, and owns the canvas size so resize() re-renders at the
new dimensions.

Design decisions:
  - render_bars has NO side effects; same input, same string.
  - Value labels are only drawn when bars are wide enough to hold them.
"""

from typing import Dict, Optional, Sequence


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 800
    height: int = 400
    bg:     str = "#0d1117"

    # bars
    bar_colors: Dict[str, str] = {
        "default":   "#6464ff",   # soft blue
        "highlight": "#f43f5e",   # rose: the index just touched
    }
    bar_opacity:  float = 0.7
    bar_gap:      int   = 2       # pixels between bars

    # labels
    label_color:     str = "#e6edf3"
    label_size:      int = 10
    label_min_width: int = 14     # bars narrower than this get no label

    # empty-state message
    empty_color: str = "#7d8590"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    values: Sequence[float],
    highlight: Optional[int] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        values    : The array state to draw.
        highlight : Index to emphasise, or None.
        config    : Visual config.
    """
    w, h = config.width, config.height
    svg_parts = [
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{w}" height="{h}" fill="{config.bg}"/>',
    ]

    if not values:
        svg_parts.append(
            f'<text x="{w / 2}" y="{h / 2}" text-anchor="middle" '
            f'font-size="14" fill="{config.empty_color}">Empty array</text>'
        )
    else:
        bar_w = w / len(values)
        for i, val in enumerate(values):
            svg_parts.append(_render_bar(i, val, bar_w, i == highlight, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def _render_bar(i: int, val: float, bar_w: float, is_highlight: bool, config: CanvasConfig) -> str:
    fill = config.bar_colors["highlight" if is_highlight else "default"]
    x = i * bar_w
    y = config.height - val
    width = max(bar_w - config.bar_gap, 1)
    css = "bar highlight" if is_highlight else "bar"

    parts = [
        f'<g class="{css}" data-index="{i}">',
        f'  <rect x="{x:.2f}" y="{y:.2f}" width="{width:.2f}" height="{val}" '
        f'fill="{fill}" fill-opacity="{1.0 if is_highlight else config.bar_opacity}"/>',
    ]
    if bar_w >= config.label_min_width:
        parts.append(
            f'  <text x="{x + 2:.2f}" y="{config.height - 5}" '
            f'font-size="{config.label_size}" font-family="Arial, sans-serif" '
            f'fill="{config.label_color}">{_fmt(val)}</text>'
        )
    parts.append("</g>")
    return "\n".join(parts)


def _fmt(val: float) -> str:
    return str(int(val)) if float(val).is_integer() else f"{val:.1f}"


# ---------------------------------------------------------------------------
# Renderer capability for the PlaybackController
# ---------------------------------------------------------------------------
class SvgRenderer:
    """
    Attributes:
        config    : Per-instance CanvasConfig (resize() mutates it).
        svg       : The most recent frame.
        highlight : Highlighted index of the most recent frame.
    """

    def __init__(self, width: int = CanvasConfig.width, height: int = CanvasConfig.height):
        self.config = CanvasConfig()
        self.config.width  = width
        self.config.height = height
        self.svg:       str           = render_bars([], config=self.config)
        self.highlight: Optional[int] = None
        self._values:   list          = []

    def render(self, values: Sequence[float], highlight: Optional[int] = None) -> None:
        self._values   = list(values)
        self.highlight = highlight
        self.svg       = render_bars(self._values, highlight, self.config)

    def resize(self, width: int, height: int) -> None:
        self.config.width  = width
        self.config.height = height
        self.svg = render_bars(self._values, self.highlight, self.config)
