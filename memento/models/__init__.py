# memento/models/__init__.py

from .movie import MovieModel
from .person import PersonModel
from .credit import CreditModel
from .watchlist import WatchlistModel
from .place import PlaceModel
from .play import PlayModel


__all__ = [
    "MovieModel",
    "PersonModel",
    "CreditModel",
    "WatchlistModel",
    "PlaceModel",
    "PlayModel",
]
