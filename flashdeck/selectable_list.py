from typing import Generic, List, Optional, TypeVar, Iterable, Iterator

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Ordered items with a single optional cursor.

    The cursor is an index into ``items`` whenever the list is non-empty and
    ``None`` when it is empty. Every structural change goes through the
    methods below so that stays true.
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self.items: List[T] = list(items) if items is not None else []
        self.cursor: Optional[int] = 0 if self.items else None

    @classmethod
    def with_items(cls, items: Iterable[T]) -> "SelectableList[T]":
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    def advance(self):
        """Move the cursor forward, stopping at the last item."""
        if not self.items:
            return
        if self.cursor is None:
            self.cursor = 0
        else:
            self.cursor = min(self.cursor + 1, len(self.items) - 1)

    def retreat(self):
        """Move the cursor back, stopping at the first item."""
        if not self.items:
            return
        if self.cursor is None:
            self.cursor = 0
        else:
            self.cursor = max(self.cursor - 1, 0)

    def selected(self) -> Optional[int]:
        if not self.items:
            return None
        return self.cursor

    def selected_item(self) -> Optional[T]:
        index = self.selected()
        if index is None:
            return None
        return self.items[index]

    def delete(self, index: int) -> T:
        """Remove and return the item at ``index``.

        An out-of-range index means the caller skipped its guard, so this
        raises instead of ignoring it.
        """
        if not 0 <= index < len(self.items):
            raise IndexError(f"delete index {index} out of range for list of length {len(self.items)}")

        item = self.items.pop(index)

        if not self.items:
            self.cursor = None
        elif self.cursor is not None and self.cursor > len(self.items) - 1:
            self.retreat()
        return item

    def insert(self, item: T, index: int):
        # Cursor keeps its index even if that now names a different item.
        self.items.insert(index, item)
        if self.cursor is None:
            self.cursor = 0

    def push(self, item: T):
        self.items.append(item)
        if self.cursor is None:
            self.cursor = 0
