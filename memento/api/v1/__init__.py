# memento/api/v1/__init__.py

from fastapi import APIRouter
from . import movies, persons, watchlist, plays, places, stats, system, images

api_router = APIRouter()

api_router.include_router(movies.router, prefix="/movies", tags=["movies"])
api_router.include_router(persons.router, prefix="/persons", tags=["persons"])
api_router.include_router(watchlist.router, prefix="/watchlist", tags=["watchlist"])
api_router.include_router(plays.router, prefix="/plays", tags=["plays"])
api_router.include_router(places.router, prefix="/places", tags=["places"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
api_router.include_router(images.router, prefix="/images", tags=["images"])
api_router.include_router(system.router, prefix="/system", tags=["system"])
