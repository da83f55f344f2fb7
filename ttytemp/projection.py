"""Mapping of raw readings onto chart rows."""

from __future__ import annotations

from typing import Sequence

from .models import ProjectedSample, Sample


def project_height(value: int, rows: int, max_scale: int) -> int:
    """Map a reading to a row index; row 0 is the top of the chart.

    ``max_scale`` lands on row 0 and a reading of 0 on row ``rows``.
    A non-positive scale puts everything on row 0. Readings below zero are
    clamped to the bottom row.
    """
    if max_scale <= 0:
        return 0
    height = rows * (max_scale - value) // max_scale
    return min(max(height, 0), rows)


def project_sample(sample: Sample, rows: int, max_scale: int) -> ProjectedSample:
    """Project every series of a sample plus its min/avg/max."""
    return ProjectedSample(
        heights=tuple(project_height(v, rows, max_scale) for v in sample.values),
        min_height=project_height(sample.min_value, rows, max_scale),
        avg_height=project_height(sample.avg_value, rows, max_scale),
        max_height=project_height(sample.max_value, rows, max_scale),
    )


def window_scale(samples: Sequence[Sample]) -> int:
    """Get the display scale: the largest reading across all samples."""
    if not samples:
        return 0
    return max(s.max_value for s in samples)


def project_window(samples: Sequence[Sample], rows: int) -> list[ProjectedSample]:
    """Project a whole window against its current scale.

    Must be redone every cycle since the scale moves as samples enter and
    leave the window.
    """
    max_scale = window_scale(samples)
    return [project_sample(s, rows, max_scale) for s in samples]
