# memento/core/dependencies.py

from memento.services import (
    ImageCache,
    MovieService,
    PersonService,
    PlaceService,
    PlayService,
    StatsService,
    TMDBService,
    WatchlistService,
)


def get_tmdb_service() -> TMDBService:
    return TMDBService()


def get_movie_service() -> MovieService:
    return MovieService()


def get_person_service() -> PersonService:
    return PersonService()


def get_watchlist_service() -> WatchlistService:
    return WatchlistService()


def get_play_service() -> PlayService:
    return PlayService()


def get_place_service() -> PlaceService:
    return PlaceService()


def get_stats_service() -> StatsService:
    return StatsService()


def get_image_cache() -> ImageCache:
    return ImageCache()
