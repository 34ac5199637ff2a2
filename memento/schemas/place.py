# memento/schemas/place.py

from typing import Optional
from pydantic import BaseModel, Field


class Place(BaseModel):
    id: int = Field(description="장소 ID")
    name: str = Field(description="장소 이름")
    is_cinema: bool = Field(default=False, description="영화관 여부")
    created_at: Optional[str] = Field(default=None, description="생성일시")

    class Config:
        from_attributes = True


class PlaceCreate(BaseModel):
    name: str = Field(min_length=1, description="장소 이름")
    is_cinema: bool = Field(default=False, description="영화관 여부")
