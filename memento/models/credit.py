# memento/models/credit.py

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from memento.database import Base


class CreditModel(Base):
    __tablename__ = "credits"

    id = Column(Integer, primary_key=True)
    movie_id = Column(Integer, ForeignKey("movies.id", ondelete="CASCADE"), nullable=False)
    person_id = Column(Integer, ForeignKey("persons.id", ondelete="CASCADE"), nullable=False)
    role_type = Column(String, nullable=False)
    character_name = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=False, server_default="0")

    def __repr__(self):
        return f"<CreditModel(movie_id={self.movie_id}, person_id={self.person_id}, role_type='{self.role_type}')>"
