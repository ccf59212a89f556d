# infrastructure/repositories/movie_repository.py
from typing import List, Optional
from domain.entities import Movie
from .base_repository import BaseRepository


class MovieRepository(BaseRepository):

    def get_all(self) -> List[Movie]:
        return list(self._items)

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        return self._find_one(lambda movie: movie.id == movie_id)

    def get_favorites(self) -> List[Movie]:
        return self._find_all(lambda movie: movie.is_favorite)

    def add(self, movie: Movie) -> None:
        # No uniqueness check: callers hand in freshly created movies
        self._append(movie)

    def toggle_favorite(self, movie_id: str) -> Optional[Movie]:
        movie = self.get_by_id(movie_id)
        if movie is not None:
            movie.is_favorite = not movie.is_favorite
        return movie
