"""
ui/
---
Presentation layer.

    from ui import render_bars, SvgRenderer
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_bars, CanvasConfig, SvgRenderer

from ui.controls import (
    playback_controls,
    algorithm_selector,
    array_generator,
    canvas_size_panel,
    analytics_panel,
    pseudocode_viewer,
)

__all__ = [
    "render_bars",
    "CanvasConfig",
    "SvgRenderer",
    "playback_controls",
    "algorithm_selector",
    "array_generator",
    "canvas_size_panel",
    "analytics_panel",
    "pseudocode_viewer",
]
