# infrastructure/repositories/genre_repository.py
from typing import List, Optional
from domain.entities import Genre, SelectableItem
from .base_repository import BaseRepository


class GenreRepository(BaseRepository):
    """One SelectableItem per Genre, built once and never resized."""

    def __init__(self):
        super().__init__(SelectableItem(title=str(genre)) for genre in Genre)

    def get_all(self) -> List[SelectableItem]:
        return list(self._items)

    def get_by_title(self, title: str) -> Optional[SelectableItem]:
        return self._find_one(lambda item: item.title == title)

    def get_selected(self) -> List[SelectableItem]:
        return self._find_all(lambda item: item.is_selected)

    def toggle(self, title: str) -> Optional[SelectableItem]:
        item = self.get_by_title(title)
        if item is not None:
            item.is_selected = not item.is_selected
        return item

    def deselect_first(self) -> Optional[SelectableItem]:
        item = self._find_one(lambda i: i.is_selected)
        if item is not None:
            item.is_selected = False
        return item
