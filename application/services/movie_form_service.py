# application/services/movie_form_service.py
import re
from typing import Optional
from core.config import FORM_FIELDS, MESSAGES, RATING_MAX, RATING_MIN
from core.logger import get_logger
from core.signals import FormSignals
from domain.entities import AddMovieValidationState, Movie
from application.services.genre_service import GenreService
from application.services.movie_service import MovieService

logger = get_logger('MovieFormService')

_DECIMAL_RE = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$', re.ASCII)


def parse_rating(value: str) -> Optional[float]:
    """Parse a decimal rating, or return None when the text is not a number."""
    if not _DECIMAL_RE.match(value):
        return None
    return float(value)


class MovieFormService:
    """
    State of the "add movie" form.

    Callers write the six text buffers and then call the matching
    ``validate_*`` method. Each validator replaces the validation state,
    publishes it and recomputes ``is_save_enabled`` through
    ``_should_enable_save``. ``add_movie`` commits the form into the catalog
    and resets everything.
    """

    def __init__(self, movie_service: MovieService, genre_service: GenreService):
        self._movie_service = movie_service
        self._genre_service = genre_service
        self.signals = FormSignals()

        self._validation_state = AddMovieValidationState()
        self.is_save_enabled = False
        self.title = ""
        self.year = ""
        self.director = ""
        self.actors = ""
        self.plot = ""
        self.rating = ""

    @property
    def validation_state(self) -> AddMovieValidationState:
        return self._validation_state

    # --- field buffers ---
    def set_field(self, name: str, value: str) -> None:
        if name not in FORM_FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        setattr(self, name, value)

    def on_field_changed(self, name: str, value: str) -> None:
        self.set_field(name, value)
        validator = getattr(self, f'validate_{name}', None)
        if validator is not None:
            validator()

    def select_genre(self, title: str) -> None:
        self._genre_service.toggle(title)
        self.validate_genres()

    # --- validators ---
    def _update_state(self, **changes) -> None:
        self._validation_state = self._validation_state.copy(**changes)
        self.signals.validation_changed.emit(self._validation_state)

    def _validate_required(self, field: str, message_key: str) -> None:
        if getattr(self, field).strip():
            self._update_state(**{f'is_{field}_valid': True, f'{field}_err_msg': ""})
        else:
            self._update_state(**{f'is_{field}_valid': False, f'{field}_err_msg': MESSAGES[message_key]})
        self._should_enable_save()

    def validate_title(self) -> None:
        self._validate_required('title', 'title_required')

    def validate_year(self) -> None:
        # Free text on purpose: no numeric or range check
        self._validate_required('year', 'year_required')

    def validate_director(self) -> None:
        self._validate_required('director', 'director_required')

    def validate_actors(self) -> None:
        self._validate_required('actors', 'actors_required')

    def validate_rating(self) -> None:
        rating_val = parse_rating(self.rating)

        if (self.rating.strip()
                and not self.rating.startswith("0")
                and rating_val is not None
                and RATING_MIN <= rating_val <= RATING_MAX):
            self._update_state(is_rating_valid=True, rating_err_msg="")
        else:
            self._update_state(is_rating_valid=False, rating_err_msg=MESSAGES['rating_invalid'])

        self._should_enable_save()

    def validate_genres(self) -> None:
        if not self._genre_service.selected_items():
            self._update_state(genre_err_msg=MESSAGES['genre_required'])
        else:
            self._update_state(genre_err_msg="")
        self._should_enable_save()

    def _should_enable_save(self) -> None:
        # title/year/director/actors gate on their raw text, rating and genre on their stored messages
        state = self._validation_state
        enabled = bool(
            self.title.strip()
            and self.year.strip()
            and self.director.strip()
            and self.actors.strip()
            and self.rating.strip() and not state.rating_err_msg
            and not state.genre_err_msg
        )
        self._set_save_enabled(enabled)

    def _set_save_enabled(self, enabled: bool) -> None:
        if enabled != self.is_save_enabled:
            self.is_save_enabled = enabled
            self.signals.save_enabled_changed.emit(enabled)

    # --- submit ---
    def add_movie(self) -> Movie:
        selected_genres = self._genre_service.selected_genres()

        rating_val = parse_rating(self.rating)
        if rating_val is None:
            raise ValueError(f"Cannot add movie with unvalidated rating {self.rating!r}")

        movie = Movie(
            title=self.title,
            director=self.director,
            actors=self.actors,
            plot=self.plot.strip(),
            genre=selected_genres,
            year=self.year,
            images=[],
            rating=rating_val,
        )
        self._movie_service.add_movie(movie)
        self.reset()
        return movie

    submit = add_movie

    def reset(self) -> None:
        self._set_save_enabled(False)
        self._validation_state = AddMovieValidationState()
        self.signals.validation_changed.emit(self._validation_state)
        for name in FORM_FIELDS:
            setattr(self, name, "")
        # Clears the first selected genre only
        self._genre_service.deselect_first()
        logger.debug("Add movie form reset")
