# core/config.py
SETTINGS_FILE = 'settings.json'
LOG_FILE = 'app_log.txt'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'

RATING_MIN = 0.0
RATING_MAX = 10.0

MESSAGES = {
    'title_required':    "Title is required",
    'year_required':     "Year is required",
    'director_required': "Director is required",
    'actors_required':   "Actors is required",
    'rating_invalid':    "Rating is required and must be valid decimal format.",
    'genre_required':    "Genre is required",
}

# Form buffers, in the order the add-movie screen shows them
FORM_FIELDS = ('title', 'year', 'director', 'actors', 'plot', 'rating')

DEFAULT_SETTINGS = {
    'log_level': 'INFO',
    'load_seed_catalog': True,
}
