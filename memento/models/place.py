# memento/models/place.py

from sqlalchemy import Column, Integer, Text, Boolean, String
from sqlalchemy.sql import func
from memento.database import Base


class PlaceModel(Base):
    __tablename__ = "places"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False, unique=True)
    is_cinema = Column(Boolean, nullable=False, server_default="0")
    created_at = Column(String, nullable=False, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<PlaceModel(id={self.id}, name='{self.name}')>"
