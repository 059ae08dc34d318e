"""Reconciliation and windowed retrieval for per-player performance series."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Sequence, Union

from courtside.models import PerformanceEntry


MIN_WINDOW_DAYS = 1
MAX_WINDOW_DAYS = 365


@dataclass(frozen=True)
class ReplaceSeries:
    """Discard the stored series and use ``entries`` instead."""

    entries: tuple[PerformanceEntry, ...]


@dataclass(frozen=True)
class AppendSeries:
    """Merge ``entries`` into the stored series by date."""

    entries: tuple[PerformanceEntry, ...]


@dataclass(frozen=True)
class NoChange:
    pass


SeriesUpdate = Union[ReplaceSeries, AppendSeries, NoChange]

NO_CHANGE = NoChange()


def series_update_from(
    replace: Iterable[PerformanceEntry] | None = None,
    append: Iterable[PerformanceEntry] | None = None,
) -> SeriesUpdate:
    if replace is not None and append is not None:
        raise ValueError("performances_replace and performances_append cannot be combined")
    if replace is not None:
        return ReplaceSeries(tuple(replace))
    if append is not None:
        return AppendSeries(tuple(append))
    return NO_CHANGE


def merge_append(
    current: Sequence[PerformanceEntry],
    incoming: Sequence[PerformanceEntry],
) -> List[PerformanceEntry]:
    """Merge ``incoming`` into ``current`` keyed by ``performance_date``.

    A same-date entry keeps its stored values for every field the incoming
    entry did not supply. The result holds one entry per distinct date and is
    sorted by date ascending.
    """
    by_date: dict[date, PerformanceEntry] = {}
    for entry in current:
        existing = by_date.get(entry.performance_date)
        by_date[entry.performance_date] = entry if existing is None else _overlay(existing, entry)
    for entry in incoming:
        existing = by_date.get(entry.performance_date)
        by_date[entry.performance_date] = entry if existing is None else _overlay(existing, entry)
    return [by_date[key] for key in sorted(by_date)]


def _overlay(existing: PerformanceEntry, incoming: PerformanceEntry) -> PerformanceEntry:
    supplied = incoming.supplied_fields()
    if not supplied:
        return existing
    return existing.model_copy(update=supplied)


def replace(incoming: Sequence[PerformanceEntry]) -> List[PerformanceEntry]:
    return list(incoming)


def clamp_window(window_days: int) -> int:
    return max(MIN_WINDOW_DAYS, min(MAX_WINDOW_DAYS, int(window_days)))


def _reference_date(reference: datetime | date) -> date:
    if isinstance(reference, datetime):
        if reference.tzinfo is not None:
            reference = reference.astimezone(timezone.utc)
        return reference.date()
    return reference


def windowed_view(
    series: Sequence[PerformanceEntry],
    window_days: int | None,
    reference: datetime | date,
) -> List[PerformanceEntry]:
    """Entries dated within ``window_days`` of ``reference``, newest first.

    Without a window the series is returned as stored, with no sort applied.
    """
    if window_days is None:
        return list(series)
    threshold = _reference_date(reference) - timedelta(days=clamp_window(window_days))
    kept = [entry for entry in series if entry.performance_date >= threshold]
    kept.sort(key=lambda entry: entry.performance_date, reverse=True)
    return kept


def apply_series_update(
    current: Sequence[PerformanceEntry],
    update: SeriesUpdate,
) -> List[PerformanceEntry]:
    if isinstance(update, ReplaceSeries):
        return replace(update.entries)
    if isinstance(update, AppendSeries):
        return merge_append(current, update.entries)
    return list(current)
