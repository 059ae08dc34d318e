"""Pure performance-series engine: merge, replace and windowed views."""

from .engine import (
    MAX_WINDOW_DAYS,
    MIN_WINDOW_DAYS,
    NO_CHANGE,
    AppendSeries,
    NoChange,
    ReplaceSeries,
    SeriesUpdate,
    apply_series_update,
    clamp_window,
    merge_append,
    replace,
    series_update_from,
    windowed_view,
)

__all__ = [
    "MAX_WINDOW_DAYS",
    "MIN_WINDOW_DAYS",
    "NO_CHANGE",
    "AppendSeries",
    "NoChange",
    "ReplaceSeries",
    "SeriesUpdate",
    "apply_series_update",
    "clamp_window",
    "merge_append",
    "replace",
    "series_update_from",
    "windowed_view",
]
