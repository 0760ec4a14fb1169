"""
canvas.py — SVG Bar Renderer
=============================
Pure rendering function: bar values + tags → SVG string.

The renderer consumes:
  • values – one value per bar (heights are value × scale)
  • tags   – one VisualTag per bar (or None → all idle)
  • config – visual config (canvas size, colours, spacing)

Design decisions:
  - NO mutation.  The caller passes everything in and gets a string back.
  - Bars are <rect id="bar-{i}"> anchored to the bottom edge so the
    browser playback can update `height`/`y` directly from frame ops.
  - Tag colouring is a dict lookup: VisualTag value → hex colour.
"""

from typing import Dict, List, Optional, Sequence

from dataset import VisualTag
from ui.renderer import BarRenderer, HEIGHT_SCALE


# ---------------------------------------------------------------------------
# Visual Config — colour palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 320
    bg:     str = "#0d1117"

    # tag → fill
    tag_colors: Dict[str, str] = {
        "idle":      "#87ceeb",   # sky blue
        "comparing": "#ef4444",   # red
        "pivot":     "#facc15",   # yellow
        "sorted":    "#22c55e",   # green
    }

    bar_gap:  int = 1
    scale:    int = HEIGHT_SCALE


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    values: Sequence[int],
    tags: Optional[Sequence[VisualTag]] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string with one bar per value.

    Args:
        values : Bar values (height = value × config.scale, capped to the canvas).
        tags   : Optional VisualTag per bar; missing → idle.
        config : Visual config.
    """
    n = len(values)
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" data-scale="{config.scale}" '
        f'style="background: {config.bg};">'
    ]

    if n:
        slot = config.width / n
        bar_w = max(1.0, slot - config.bar_gap)
        for i, value in enumerate(values):
            tag = tags[i] if tags is not None and i < len(tags) else VisualTag.IDLE
            svg_parts.append(_render_bar(i, value, tag, i * slot, bar_w, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def render_renderer(renderer: BarRenderer, config: CanvasConfig = CONFIG) -> str:
    """Snapshot of an in-memory BarRenderer."""
    return render_bars(renderer.values, renderer.tags, config)


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(
    index: int,
    value: int,
    tag: VisualTag,
    x: float,
    width: float,
    config: CanvasConfig,
) -> str:
    h = min(config.height, int(value) * config.scale)
    y = config.height - h
    fill = config.tag_colors.get(tag.value, config.tag_colors["idle"])
    return (
        f'<rect id="bar-{index}" class="bar" data-value="{int(value)}" '
        f'x="{x:.2f}" y="{y}" width="{width:.2f}" height="{h}" fill="{fill}"/>'
    )


def tag_palette(config: CanvasConfig = CONFIG) -> Dict[str, str]:
    """Colour lookup shipped to the browser for frame playback."""
    return dict(config.tag_colors)


__all__: List[str] = ["CanvasConfig", "CONFIG", "render_bars", "render_renderer", "tag_palette"]
