# memento/models/watchlist.py

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.sql import func
from memento.database import Base


class WatchlistModel(Base):
    __tablename__ = "watchlist"

    id = Column(Integer, primary_key=True)
    # 중복 방지는 INSERT ... WHERE NOT EXISTS 로 처리
    movie_id = Column(Integer, ForeignKey("movies.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(String, nullable=False, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<WatchlistModel(movie_id={self.movie_id})>"
