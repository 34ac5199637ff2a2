# memento/models/movie.py

from sqlalchemy import Column, Integer, String, Text, Float
from sqlalchemy.sql import func
from memento.database import Base


class MovieModel(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    imdb_id = Column(String, unique=True, nullable=True)
    tmdb_id = Column(Integer, unique=True, nullable=True)
    poster = Column(Text, nullable=True)
    tagline = Column(Text, nullable=True)
    overview = Column(Text, nullable=True)
    original_language = Column(String, nullable=True)
    runtime = Column(Integer, nullable=True)
    release_date = Column(String, nullable=True)
    tmdb_average = Column(Float, nullable=True)
    tmdb_vote_count = Column(Integer, nullable=True)
    imdb_rating = Column(Float, nullable=True)
    imdb_vote_count = Column(Integer, nullable=True)
    revenue = Column(Integer, nullable=True)
    letterboxd_url = Column(Text, nullable=True)
    created_at = Column(String, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(String, nullable=False, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<MovieModel(id={self.id}, tmdb_id={self.tmdb_id}, title='{self.title}')>"
