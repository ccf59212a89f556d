"""Tests for the movie catalog."""

import pytest

from domain.entities import Genre, Movie


def _movie(title="Heat", **kwargs):
    fields = dict(title=title, year="1995", genre=[Genre.CRIME], director="Michael Mann",
                  actors="Al Pacino", plot="", images=[], rating=8.3)
    fields.update(kwargs)
    return Movie(**fields)


def test_seed_catalog_loaded(movie_service):
    titles = [m.title for m in movie_service.movies]
    assert titles[0] == "Avatar"
    assert len(titles) == 5
    assert not movie_service.favorite_movies()


def test_toggle_favorite_flips_flag(movie_service):
    target = movie_service.movies[1]
    movie_service.toggle_favorite(target.id)
    assert target.is_favorite is True
    assert movie_service.favorite_movies() == (target,)

    movie_service.toggle_favorite(target.id)
    assert target.is_favorite is False
    assert movie_service.favorite_movies() == ()


def test_update_movie_toggles_by_id(movie_service):
    target = movie_service.movies[0]
    movie_service.update_movie(target)
    assert movie_service.get_movie(target.id).is_favorite


def test_toggle_favorite_unknown_id_is_noop(movie_service):
    """Unknown ids leave entries, order and flags untouched and publish nothing."""
    before = [(m.id, m.is_favorite) for m in movie_service.movies]
    published = []
    movie_service.signals.movies_changed.connect(published.append)

    movie_service.toggle_favorite("does-not-exist")

    assert [(m.id, m.is_favorite) for m in movie_service.movies] == before
    assert published == []


def test_favorite_movies_is_recomputed(movie_service):
    first, second = movie_service.movies[:2]
    movie_service.toggle_favorite(first.id)
    assert movie_service.favorite_movies() == movie_service.favorite_movies()

    movie_service.toggle_favorite(second.id)
    assert movie_service.favorite_movies() == (first, second)


def test_add_movie_appends_without_uniqueness_check(movie_service):
    movie = _movie()
    movie_service.add_movie(movie)
    movie_service.add_movie(movie)
    assert movie_service.movies[-2:] == (movie, movie)
    assert len(movie_service.movies) == 7


def test_every_mutation_publishes_full_snapshot(movie_service):
    published = []
    movie_service.signals.movies_changed.connect(published.append)

    movie = _movie()
    movie_service.add_movie(movie)
    movie_service.toggle_favorite(movie.id)

    assert len(published) == 2
    assert published[0] == movie_service.movies
    assert isinstance(published[0], tuple)
    assert published[1][-1].is_favorite


def test_get_movie_missing_returns_none(movie_service):
    assert movie_service.get_movie("nope") is None


def test_movie_fields_are_immutable_except_favorite():
    movie = _movie()
    with pytest.raises(AttributeError):
        movie.id = "other"
    with pytest.raises(AttributeError):
        movie.title = "Changed"
    with pytest.raises(AttributeError):
        movie.rating = 1.0
    assert movie.title == "Heat"
    assert movie.rating == 8.3
    movie.is_favorite = True
    assert movie.is_favorite


def test_new_movies_get_unique_ids():
    assert _movie().id != _movie().id
