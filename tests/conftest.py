"""Shared fixtures for the catalog tests."""

import logging
import sys

import pytest

from core import config
from core.container import AppContainer
from infrastructure.seed import get_movies


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings file at a temp dir so tests never touch the real one."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr(config, "SETTINGS_FILE", str(path))
    return path


@pytest.fixture
def container():
    return AppContainer(seed=get_movies())


@pytest.fixture
def movie_service(container):
    return container.movie_service


@pytest.fixture
def genre_service(container):
    return container.genre_service


@pytest.fixture
def form(container):
    return container.form_service


def fill_valid_form(form, genre="DRAMA"):
    """Fill every field with valid data, select one genre and run all validators."""
    form.title = "Dune"
    form.year = "2021"
    form.director = "Villeneuve"
    form.actors = "Chalamet"
    form.plot = "  Spice.  "
    form.rating = "8.5"
    form.select_genre(genre)
    form.validate_title()
    form.validate_year()
    form.validate_director()
    form.validate_actors()
    form.validate_rating()


@pytest.fixture
def restore_logging(monkeypatch):
    """Undo root logger and excepthook changes made by setup_logging."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
