# memento/models/play.py

from sqlalchemy import Column, Integer, String, ForeignKey
from memento.database import Base


class PlayModel(Base):
    __tablename__ = "plays"

    id = Column(Integer, primary_key=True)
    movie_id = Column(Integer, ForeignKey("movies.id", ondelete="CASCADE"), nullable=False)
    watched_at = Column(String, nullable=False)
    watch_order = Column(Integer, nullable=False, server_default="1")
    # 장소가 삭제되면 관람 기록은 남기고 NULL 처리
    place_id = Column(Integer, ForeignKey("places.id", ondelete="SET NULL"), nullable=True)

    def __repr__(self):
        return f"<PlayModel(id={self.id}, movie_id={self.movie_id}, watched_at='{self.watched_at}')>"
