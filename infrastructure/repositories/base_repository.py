# infrastructure/repositories/base_repository.py
from typing import Callable, Iterable, List, Optional


class BaseRepository:
    """Ordered in-memory storage shared by the repositories. Lives as long as its owner."""

    def __init__(self, items: Optional[Iterable] = None):
        self._items = list(items) if items is not None else []

    def _append(self, item) -> None:
        self._items.append(item)

    def _find_all(self, predicate: Callable) -> List:
        return [item for item in self._items if predicate(item)]

    def _find_one(self, predicate: Callable):
        return next((item for item in self._items if predicate(item)), None)

    def __len__(self) -> int:
        return len(self._items)
