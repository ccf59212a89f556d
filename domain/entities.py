# domain/entities.py
from __future__ import annotations
import dataclasses
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List

class Genre(str, Enum):
    """Closed set of genres a movie can be tagged with. Order is display order."""
    ACTION = "ACTION"
    ADVENTURE = "ADVENTURE"
    ANIMATION = "ANIMATION"
    BIOGRAPHY = "BIOGRAPHY"
    COMEDY = "COMEDY"
    CRIME = "CRIME"
    DOCUMENTARY = "DOCUMENTARY"
    DRAMA = "DRAMA"
    FAMILY = "FAMILY"
    FANTASY = "FANTASY"
    FILM_NOIR = "FILM_NOIR"
    HISTORY = "HISTORY"
    HORROR = "HORROR"
    MUSIC = "MUSIC"
    MUSICAL = "MUSICAL"
    MYSTERY = "MYSTERY"
    ROMANCE = "ROMANCE"
    SCIFI = "SCIFI"
    SPORT = "SPORT"
    THRILLER = "THRILLER"
    WAR = "WAR"
    WESTERN = "WESTERN"

    def __str__(self) -> str:
        return self.name

def _new_movie_id() -> str:
    return str(uuid.uuid4())

@dataclass
class Movie:
    title: str
    year: str
    genre: List[Genre]
    director: str
    actors: str
    plot: str
    images: List[str]
    rating: float
    id: str = field(default_factory=_new_movie_id)
    is_favorite: bool = False

    def __setattr__(self, name, value):
        # Only the favorite flag may change once a field is assigned
        if name != 'is_favorite' and name in self.__dict__:
            raise AttributeError(f"Movie.{name} is immutable")
        super().__setattr__(name, value)


@dataclass
class SelectableItem:
    title: str
    is_selected: bool = False

@dataclass(frozen=True)
class AddMovieValidationState:
    is_title_valid: bool = False
    title_err_msg: str = ""
    is_year_valid: bool = False
    year_err_msg: str = ""
    is_director_valid: bool = False
    director_err_msg: str = ""
    is_actors_valid: bool = False
    actors_err_msg: str = ""
    is_rating_valid: bool = False
    rating_err_msg: str = ""
    genre_err_msg: str = ""

    def copy(self, **changes) -> AddMovieValidationState:
        """Return a new state with ``changes`` applied; this one is left untouched."""
        return dataclasses.replace(self, **changes)
