# journal_helper/data_model/month_grid.py
"""
A two-dimensional structure with consecutive months as columns and an
arbitrary hashable row key, usually an account name.

Rows are dense: once a key is written, its row holds one slot per month of the
grid. Keys that were never written have no row at all.
"""
from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterator, Optional, TypeVar

import pandas as pd

from .errors import MonthOutOfRangeError, MonthRangeError
from .j_wrapper import MonthYear

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MonthGrid(Generic[K, V]):
    def __init__(self, first: MonthYear, last: MonthYear):
        if last < first:
            raise MonthRangeError(f"Last month {last} is before first month {first}")
        self._rows: dict[K, list[Optional[V]]] = {}
        self.start_month: MonthYear = first
        self.total_months: int = last.offset_from(first) + 1

    @property
    def final_month(self) -> MonthYear:
        month = self.start_month
        for _ in range(self.total_months - 1):
            month = month.next_month()
        return month

    def _index(self, month: MonthYear) -> int:
        offset = month.offset_from(self.start_month)
        if not 0 <= offset < self.total_months:
            raise MonthOutOfRangeError(
                f"Month {month} is outside {self.start_month}..{self.final_month}"
            )
        return offset

    def insert(self, key: K, month: MonthYear, value: V) -> None:
        index = self._index(month)
        row = self._rows.get(key)
        if row is None:
            row = [None] * self.total_months
            self._rows[key] = row
        row[index] = value

    def __getitem__(self, index: tuple[MonthYear, K]) -> Optional[V]:
        month, key = index
        row = self._rows.get(key)
        if row is None:
            return None
        return row[self._index(month)]

    def __setitem__(self, index: tuple[MonthYear, K], value: Optional[V]) -> None:
        month, key = index
        offset = self._index(month)
        self._rows.setdefault(key, [None] * self.total_months)[offset] = value

    def __contains__(self, key: object) -> bool:
        return key in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def keys(self) -> list[K]:
        return list(self._rows)

    def row(self, key: K) -> Optional[list[Optional[V]]]:
        """A copy of the row for ``key``, or ``None`` if the key was never written."""
        row = self._rows.get(key)
        return None if row is None else list(row)

    def months(self) -> Iterator[MonthYear]:
        month = self.start_month
        for _ in range(self.total_months):
            yield month
            month = month.next_month()

    def to_frame(
        self, render: Callable[[V], object] | None = None, empty: object = None
    ) -> pd.DataFrame:
        """
        Return the grid as a DataFrame: one row per key (sorted when the keys
        are orderable), one ``YYYY-MM`` column per month, ``empty`` for empty
        slots. ``render`` converts each present value.
        """
        columns = [str(m) for m in self.months()]
        try:
            keys = sorted(self._rows)
        except TypeError:
            keys = list(self._rows)
        data = [
            [empty if v is None else (render(v) if render else v) for v in self._rows[k]]
            for k in keys
        ]
        return pd.DataFrame(data, index=pd.Index(keys, name="key"), columns=columns, dtype=object)
