# memento/schemas/__init__.py

from .movie import Movie, MovieSummary, WatchlistMovie, ImdbRating, RefreshSummary, PersonFilmography
from .person import Person, PersonStat, PersonAppearanceStat
from .credit import RoleType, CreditInput, MovieCredit
from .place import Place, PlaceCreate
from .play import Play, PlayWithMovie, PlayCreate, PlayUpdate
from .stats import DashboardStats, RecentPlay, PeopleSort
from .search import MovieSearchResult, PersonCreditMovie

__all__ = [
    "Movie",
    "MovieSummary",
    "WatchlistMovie",
    "ImdbRating",
    "RefreshSummary",
    "PersonFilmography",
    "Person",
    "PersonStat",
    "PersonAppearanceStat",
    "RoleType",
    "CreditInput",
    "MovieCredit",
    "Place",
    "PlaceCreate",
    "Play",
    "PlayWithMovie",
    "PlayCreate",
    "PlayUpdate",
    "DashboardStats",
    "RecentPlay",
    "PeopleSort",
    "MovieSearchResult",
    "PersonCreditMovie",
]
