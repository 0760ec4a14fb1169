"""
ui/
---
Presentation layer.

    from ui import BarRenderer, RecordingRenderer, render_bars
    from ui import ControlPanel, algorithm_selector, …
"""

from ui.renderer import Renderer, BarRenderer, RecordingRenderer, Frame, HEIGHT_SCALE
from ui.canvas   import render_bars, render_renderer, tag_palette, CanvasConfig

from ui.controls import (
    ControlPanel,
    ControlsDisabledError,
    algorithm_selector,
    array_controls,
    speed_control,
    time_panel,
    description_panel,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
)

__all__ = [
    "Renderer",
    "BarRenderer",
    "RecordingRenderer",
    "Frame",
    "HEIGHT_SCALE",
    "render_bars",
    "render_renderer",
    "tag_palette",
    "CanvasConfig",
    "ControlPanel",
    "ControlsDisabledError",
    "algorithm_selector",
    "array_controls",
    "speed_control",
    "time_panel",
    "description_panel",
    "analytics_panel",
    "comparison_panel",
    "pseudocode_viewer",
]
