"""Observable list model shared by every item view in the application."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class Signal:
    """A small observer list; connected slots run in connection order."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Register ``slot`` to be called on every emission."""
        self._slots.append(slot)

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)


class ListModel(Generic[T]):
    """An ordered list of items that reports its changes through signals.

    Row operations that receive an out-of-range position leave the model
    untouched, as the views expect.
    """

    def __init__(self, item_factory: Callable[[], T]) -> None:
        self._factory = item_factory
        self._data: list[T] = []
        self.count_changed = Signal()
        self.updated = Signal()
        self.data_changed = Signal()
        self.rows_inserted = Signal()
        self.rows_removed = Signal()
        self.model_reset = Signal()

    def items(self) -> list[T]:
        """The live list of items; changes to it are not announced."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def is_empty(self) -> bool:
        return not self._data

    def clear(self) -> None:
        self._data = []
        self.model_reset.emit()
        self.count_changed.emit()

    def _insert(self, row: int, count: int) -> bool:
        if count <= 0 or row < 0 or row > len(self._data):
            return False
        self._data[row:row] = [self._factory() for _ in range(count)]
        self.rows_inserted.emit(row, row + count - 1)
        return True

    def _remove(self, row: int, count: int) -> bool:
        if count <= 0 or row < 0 or row + count > len(self._data):
            return False
        del self._data[row:row + count]
        self.rows_removed.emit(row, row + count - 1)
        return True

    def insert_rows(self, row: int, count: int) -> bool:
        """Insert ``count`` default items before ``row``."""
        inserted = self._insert(row, count)
        self.count_changed.emit()
        return inserted

    def remove_rows(self, row: int, count: int) -> bool:
        """Remove ``count`` items starting at ``row``."""
        removed = self._remove(row, count)
        self.count_changed.emit()
        return removed

    def swap_row(self, from_index: int, to_index: int) -> None:
        if min(from_index, to_index) < 0 or max(from_index, to_index) >= len(self._data):
            return
        data = self._data
        data[from_index], data[to_index] = data[to_index], data[from_index]
        self.data_changed.emit(from_index, from_index)
        self.data_changed.emit(to_index, to_index)

    def up_row(self, index: int) -> None:
        if index <= 0:
            return
        self.swap_row(index - 1, index)

    def down_row(self, index: int) -> None:
        self.swap_row(index, index + 1)

    def append(self, item: T) -> None:
        end = len(self._data)
        self._data.append(item)
        self.rows_inserted.emit(end, end)
        self.count_changed.emit()

    def set(self, index: int, item: T) -> None:
        if not 0 <= index < len(self._data):
            return
        self._data[index] = item
        self.data_changed.emit(index, index)

    def set_all(self, items: Iterable[T]) -> None:
        """Replace the whole content, resizing the model as needed."""
        new_items = list(items)
        new_len, old_len = len(new_items), len(self._data)
        if new_len < old_len:
            self._remove(new_len, old_len - new_len)
        elif new_len > old_len:
            self._insert(old_len, new_len - old_len)
        self._data[:] = new_items
        self.items_changed(0, new_len)

    def items_changed(self, from_index: int, to_index: int) -> None:
        """Announce that rows ``from_index`` to ``to_index`` have changed."""
        to_index = min(to_index, len(self._data))
        if from_index > to_index:
            return
        self.data_changed.emit(from_index, to_index)

    def item(self, index: int) -> T:
        """The item at ``index``, or a fresh default item when out of range."""
        if 0 <= index < len(self._data):
            return self._data[index]
        return self._factory()

    def item_list(self) -> list[T]:
        return list(self._data)