# application/services/movie_service.py
from typing import Optional, Tuple
from core.logger import get_logger
from core.signals import CatalogSignals
from domain.entities import Movie
from infrastructure.repositories.movie_repository import MovieRepository

logger = get_logger('MovieService')


class MovieService:
    """
    Owns the movie catalog. Every mutation publishes the full list on
    ``signals.movies_changed``.
    """

    def __init__(self, movie_repository: MovieRepository):
        self._movie_repo = movie_repository
        self.signals = CatalogSignals()

    @property
    def movies(self) -> Tuple[Movie, ...]:
        return tuple(self._movie_repo.get_all())

    def get_movie(self, movie_id: str) -> Optional[Movie]:
        return self._movie_repo.get_by_id(movie_id)

    def favorite_movies(self) -> Tuple[Movie, ...]:
        # Derived on every call so it always follows the current flags
        return tuple(self._movie_repo.get_favorites())

    def toggle_favorite(self, movie_id: str) -> None:
        movie = self._movie_repo.toggle_favorite(movie_id)
        if movie is None:
            logger.debug(f"toggle_favorite: no movie with id {movie_id}")
            return
        logger.info(f"Movie {movie_id} favorite set to {movie.is_favorite}")
        self._publish()

    def update_movie(self, movie: Movie) -> None:
        self.toggle_favorite(movie.id)

    def add_movie(self, movie: Movie) -> None:
        self._movie_repo.add(movie)
        logger.info(f"Added movie {movie.title!r} ({movie.id}), catalog size {len(self._movie_repo)}")
        self._publish()

    def _publish(self) -> None:
        self.signals.movies_changed.emit(self.movies)
