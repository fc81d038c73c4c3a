"""
Chart geometry for the insights screen.

Projects the bucketed series into plot coordinates: a polyline for the
mood trend (domain 0-10) and bar rectangles for session frequency
(domain 0 to a dynamic maximum). Pure geometry; no aggregation.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

MOOD_SCALE_MAX = 10
MIN_BAR_SCALE = 5
BAR_HEADROOM = 1.2
BAR_GAP = 4


@dataclass(frozen=True)
class ChartFrame:
    """Plot area dimensions in pixels."""

    width: float = 280
    height: float = 160
    padding: float = 20

    @property
    def plot_width(self) -> float:
        return max(self.width - self.padding * 2, 0)

    @property
    def plot_height(self) -> float:
        return max(self.height - self.padding * 2, 0)

    @property
    def baseline(self) -> float:
        """Y coordinate of the zero line."""
        return self.height - self.padding


@dataclass(frozen=True)
class BarRect:
    """One bar of a bar chart."""

    x: float
    y: float
    width: float
    height: float
    value: float
    label: str = ""

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "value": self.value,
            "label": self.label,
        }


DEFAULT_FRAME = ChartFrame()


def _scaled_height(value: float, max_value: float, frame: ChartFrame) -> float:
    if max_value <= 0:
        return 0.0
    return (value / max_value) * frame.plot_height


def dynamic_max(values: Sequence[float]) -> int:
    """Upper bound of the bar chart domain: 20% headroom, at least 5."""
    if not values:
        return MIN_BAR_SCALE
    return max(math.ceil(max(values) * BAR_HEADROOM), MIN_BAR_SCALE)


def line_points(
    values: Sequence[float],
    max_value: float = MOOD_SCALE_MAX,
    frame: ChartFrame = DEFAULT_FRAME,
) -> List[Tuple[float, float]]:
    """
    Polyline vertices for a series.

    Points are spaced evenly across the plot width. A single point is
    placed in the horizontal centre.
    """
    count = len(values)
    if count == 0:
        return []

    points = []
    for index, value in enumerate(values):
        if count == 1:
            x = frame.padding + frame.plot_width / 2
        else:
            x = frame.padding + index * frame.plot_width / (count - 1)
        y = frame.baseline - _scaled_height(value, max_value, frame)
        points.append((x, y))
    return points


def line_path(points: Sequence[Tuple[float, float]]) -> str:
    """SVG path data (``M x,y L x,y ...``) through the given points."""
    if not points:
        return ""
    return "M " + " L ".join(f"{x:g},{y:g}" for x, y in points)


def bar_rects(
    values: Sequence[float],
    labels: Optional[Sequence[str]] = None,
    max_value: Optional[float] = None,
    frame: ChartFrame = DEFAULT_FRAME,
) -> List[BarRect]:
    """
    Bars for a series, left to right.

    Args:
        values: Bar values
        labels: Optional label per bar
        max_value: Domain maximum (defaults to ``dynamic_max(values)``)
        frame: Plot dimensions

    Returns:
        One BarRect per value
    """
    count = len(values)
    if count == 0:
        return []
    if max_value is None:
        max_value = dynamic_max(values)

    slot = frame.plot_width / count
    bar_width = max(slot - BAR_GAP, 0)

    bars = []
    for index, value in enumerate(values):
        height = _scaled_height(value, max_value, frame)
        bars.append(BarRect(
            x=frame.padding + index * slot,
            y=frame.baseline - height,
            width=bar_width,
            height=height,
            value=value,
            label=labels[index] if labels and index < len(labels) else "",
        ))
    return bars
