# -*- coding: utf-8 -*-
# core/container.py
from core.logger import get_logger
from core.settings import load_setting
from infrastructure.repositories.movie_repository import MovieRepository
from infrastructure.repositories.genre_repository import GenreRepository
from infrastructure.seed import get_movies
from application.services.movie_service import MovieService
from application.services.genre_service import GenreService
from application.services.movie_form_service import MovieFormService

logger = get_logger('AppContainer')

class AppContainer:
    """
    组装仓库与服务。由持有者创建并向下传递，不做全局单例。
    ``seed`` 为初始电影列表；为 None 时按 ``load_seed_catalog`` 设置决定是否加载默认目录。
    """

    def __init__(self, seed=None):
        self._init_components(seed)

    def _init_components(self, seed):
        if seed is None:
            seed = get_movies() if load_setting('load_seed_catalog', True) else []

        self.movie_repo = MovieRepository(seed)
        self.genre_repo = GenreRepository()

        self.movie_service = MovieService(self.movie_repo)
        self.genre_service = GenreService(self.genre_repo)
        self.form_service = MovieFormService(self.movie_service, self.genre_service)
        logger.info(f"Container ready with {len(self.movie_repo)} movies")
