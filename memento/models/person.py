# memento/models/person.py

from sqlalchemy import Column, Integer, Text, String
from sqlalchemy.sql import func
from memento.database import Base

class PersonModel(Base):
    __tablename__ = "persons"

    id = Column(Integer, primary_key=True)
    tmdb_person_id = Column(Integer, unique=True, nullable=False)
    name = Column(Text, nullable=False)
    profile_path = Column(Text, nullable=True)
    biography = Column(Text, nullable=True)
    birthday = Column(String, nullable=True)
    place_of_birth = Column(Text, nullable=True)
    deathday = Column(String, nullable=True)
    created_at = Column(String, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(String, nullable=False, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<PersonModel(id={self.id}, name='{self.name}')>"
