"""
dataset/
--------
Core data layer.  Public API:

    from dataset import Dataset, VisualTag
    from dataset import DatasetError, NegativeValueError
"""

from dataset.tags    import VisualTag
from dataset.dataset import Dataset, DatasetError, NegativeValueError

__all__ = [
    "Dataset",
    "VisualTag",
    "DatasetError",
    "NegativeValueError",
]
