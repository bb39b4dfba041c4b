"""Tabular helpers for indicator results."""

from ahma_studio.compute.frame import FRAME_COLUMNS, indicator_frame, write_indicator_frame

__all__ = [
    "FRAME_COLUMNS",
    "indicator_frame",
    "write_indicator_frame",
]
