"""Ordered, kind-indexed collection of data points."""

from collections.abc import Iterable, Iterator

from kycsdk.datapoints.enums import DataPointKind
from kycsdk.datapoints.models import DataPoint


class DataPointList:
    """A user's data points grouped by kind.

    Kind groups keep the order in which each kind was first added and
    entries keep insertion order within a group. Iteration follows that
    order, which makes serialized payloads deterministic.

    Not safe for concurrent mutation; owners serialize writes.
    """

    def __init__(self, data_points: Iterable[DataPoint] | None = None) -> None:
        self._data_points: dict[DataPointKind, list[DataPoint]] = {}
        for data_point in data_points or ():
            self.add(data_point)

    def add(self, data_point: DataPoint) -> None:
        """Append under the data point's kind. Never deduplicates."""
        self._data_points.setdefault(data_point.kind, []).append(data_point)

    def replace(self, data_point: DataPoint) -> None:
        """Make `data_point` the only entry of its kind.

        An existing kind group keeps its position in iteration order.
        """
        self._data_points[data_point.kind] = [data_point]

    def remove(self, kind: DataPointKind) -> None:
        self._data_points.pop(kind, None)

    def get(self, kind: DataPointKind) -> list[DataPoint]:
        """Snapshot of the entries of `kind`, empty when there are none."""
        return list(self._data_points.get(kind, ()))

    def first(self, kind: DataPointKind) -> DataPoint | None:
        entries = self._data_points.get(kind)
        return entries[0] if entries else None

    def kinds(self) -> list[DataPointKind]:
        return list(self._data_points)

    def deep_copy(self) -> "DataPointList":
        return DataPointList(data_point.deep_copy() for data_point in self)

    def __iter__(self) -> Iterator[DataPoint]:
        for entries in list(self._data_points.values()):
            yield from list(entries)

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._data_points.values())

    def __contains__(self, kind: object) -> bool:
        return kind in self._data_points

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataPointList):
            return NotImplemented
        return self._data_points == other._data_points

    def __repr__(self) -> str:
        return f"DataPointList({list(self)!r})"
