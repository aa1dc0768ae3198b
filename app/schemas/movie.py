from pydantic import BaseModel, Field, field_validator
from datetime import date
from typing import Optional

from app.models.movie import Movie
from app.schemas.validation import SafeStringMixin


DESCRIPTION_MAX_LENGTH = 350


class MovieAdd(BaseModel, SafeStringMixin):
    """Schema for adding a movie"""
    genre_id: int = Field(..., description="ID of an existing genre")
    title: str = Field(..., min_length=2, max_length=150)
    director: str = Field(..., min_length=2, max_length=150)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    price: float
    release_date: date

    @field_validator('title', 'director')
    @classmethod
    def clean_text(cls, v):
        return cls.validate_no_script(v)

    @field_validator('description')
    @classmethod
    def clean_description(cls, v):
        v = cls.sanitize_html(cls.validate_no_script(v))
        if v and len(v) > DESCRIPTION_MAX_LENGTH:
            raise ValueError(f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters")
        return v


class MovieEdit(MovieAdd):
    """Schema for updating a movie; every field is overwritten"""
    id: int = Field(..., description="Movie ID")


class MovieResult(BaseModel):
    """Schema for movie response"""
    id: int
    genre_id: int
    genre_name: Optional[str] = None  # Genre title, when loaded with the movie
    title: str
    director: str
    description: Optional[str] = None
    price: float
    release_date: date

    class Config:
        from_attributes = True


def to_movie(data: MovieAdd) -> Movie:
    """Build a Movie entity from an add or edit payload"""
    return Movie(**data.model_dump())
