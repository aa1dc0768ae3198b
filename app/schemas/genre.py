from pydantic import BaseModel, Field, field_validator

from app.models.genre import Genre
from app.schemas.validation import SafeStringMixin


class GenreAdd(BaseModel, SafeStringMixin):
    """Schema for adding a genre"""
    title: str = Field(..., min_length=2, max_length=150, description="Genre title")

    @field_validator('title')
    @classmethod
    def clean_title(cls, v):
        return cls.validate_no_script(v)


class GenreEdit(GenreAdd):
    """Schema for updating a genre; id must match the one in the path"""
    id: int = Field(..., description="Genre ID")


class GenreResult(BaseModel):
    """Schema for genre response"""
    id: int
    title: str

    class Config:
        from_attributes = True


def to_genre(data: GenreAdd) -> Genre:
    """Build a Genre entity from an add or edit payload"""
    return Genre(**data.model_dump())
