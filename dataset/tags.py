"""
tags.py — Bar Visual Tags
==========================
One tag per bar, one colour per tag.  COMPARING and PIVOT are transient:
every run clears them before it finishes.
"""

from enum import Enum


# ---------------------------------------------------------------------------
# Visual Tag Enum — maps 1-to-1 with the bar colour palette
# ---------------------------------------------------------------------------
class VisualTag(Enum):
    IDLE       = "idle"        # default sky blue
    COMPARING  = "comparing"   # red: the bar(s) being compared / written RIGHT NOW
    PIVOT      = "pivot"       # yellow: pivot, selected key or current minimum
    SORTED     = "sorted"      # green: in its final position

    @property
    def is_transient(self) -> bool:
        """True for tags that must be cleared before a run ends."""
        return self in (VisualTag.COMPARING, VisualTag.PIVOT)
