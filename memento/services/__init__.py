# memento/services/__init__.py

from .tmdb_service import TMDBService
from .imdb_service import IMDbService
from .image_service import ImageCache
from .person_service import PersonService
from .movie_service import MovieService
from .watchlist_service import WatchlistService
from .play_service import PlayService
from .place_service import PlaceService
from .stats_service import StatsService

__all__ = [
    "TMDBService",
    "IMDbService",
    "ImageCache",
    "PersonService",
    "MovieService",
    "WatchlistService",
    "PlayService",
    "PlaceService",
    "StatsService",
]
