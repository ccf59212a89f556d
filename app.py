# app.py
import logging

from core.config import LOG_FILE
from core.container import AppContainer
from core.logger import setup_logging


class AppManager:
    """
    Process-level owner of the catalog state. The presentation layer connects
    to ``movies_changed``, ``validation_changed`` and ``save_enabled_changed``
    on the services it is handed.
    """

    def __init__(self, seed=None, log_file=LOG_FILE):
        setup_logging(log_file)
        self.container = AppContainer(seed)
        self.movie_service = self.container.movie_service
        self.genre_service = self.container.genre_service
        self.form_service = self.container.form_service

        self.movie_service.signals.movies_changed.connect(self._on_movies_changed)

    def _on_movies_changed(self, movies):
        favorites = sum(1 for movie in movies if movie.is_favorite)
        logging.debug(f"Catalog now holds {len(movies)} movies, {favorites} favorites")


if __name__ == '__main__':
    manager = AppManager()
    logging.info(f"Loaded {len(manager.movie_service.movies)} movies")
