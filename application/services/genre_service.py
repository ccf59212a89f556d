# application/services/genre_service.py
from typing import List
from core.logger import get_logger
from domain.entities import Genre, SelectableItem
from infrastructure.repositories.genre_repository import GenreRepository

logger = get_logger('GenreService')


class GenreService:
    def __init__(self, genre_repository: GenreRepository):
        self._genre_repo = genre_repository

    @property
    def selectable_items(self) -> List[SelectableItem]:
        return self._genre_repo.get_all()

    def toggle(self, title: str) -> None:
        item = self._genre_repo.toggle(title)
        if item is None:
            logger.debug(f"toggle: no genre titled {title!r}")

    def select_genre(self, selected_item: SelectableItem) -> None:
        self.toggle(selected_item.title)

    def selected_items(self) -> List[SelectableItem]:
        return self._genre_repo.get_selected()

    def selected_genres(self) -> List[Genre]:
        genres = []
        for item in self._genre_repo.get_selected():
            try:
                genres.append(Genre[item.title])
            except KeyError:
                # Items are built from Genre itself, so this is a broken invariant
                logger.error(f"Selected item {item.title!r} is not a Genre member")
                raise
        return genres

    def deselect_first(self) -> None:
        self._genre_repo.deselect_first()
