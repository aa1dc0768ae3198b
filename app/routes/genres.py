"""
Genre Routes - catalog categories
Business rejections from GenreService (None / False) become 400 or 404 here
"""

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from app.schemas.genre import GenreAdd, GenreEdit, GenreResult, to_genre
from app.services.genre_service import GenreService
from app.utils.dependencies import clean_search_text, get_genre_service

router = APIRouter(prefix="/api/genres", tags=["Genres"])


@router.get("/", response_model=List[GenreResult])
def get_all_genres(genre_service: GenreService = Depends(get_genre_service)):
    """Get every genre"""
    return genre_service.get_all()


@router.get("/search/{title}", response_model=List[GenreResult])
def search_genres(title: str, genre_service: GenreService = Depends(get_genre_service)):
    """Genres whose title contains the given text"""
    genres = genre_service.search(clean_search_text(title))
    if not genres:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No genre was found")
    return genres


@router.get("/{id}", response_model=GenreResult)
def get_genre(id: int, genre_service: GenreService = Depends(get_genre_service)):
    """Get a genre by id"""
    genre = genre_service.get_by_id(id)
    if genre is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Genre not found")
    return genre


@router.post("/", response_model=GenreResult)
def add_genre(genre_data: GenreAdd, genre_service: GenreService = Depends(get_genre_service)):
    """
    Add a genre

    - **title**: 2-150 characters, must not be used by another genre
    """
    genre = genre_service.add(to_genre(genre_data))
    if genre is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Genre title already exists")
    return genre


@router.put("/{id}", response_model=GenreResult)
def update_genre(
    id: int,
    genre_data: GenreEdit,
    genre_service: GenreService = Depends(get_genre_service)
):
    """Rename a genre. The id in the body must match the path."""
    if id != genre_data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Path id and body id differ")

    if genre_service.get_by_id(id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Genre not found")

    genre = genre_service.update(to_genre(genre_data))
    if genre is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Genre title already exists")
    return genre


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_genre(id: int, genre_service: GenreService = Depends(get_genre_service)):
    """Remove a genre that has no movies"""
    genre = genre_service.get_by_id(id)
    if genre is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Genre not found")

    if not genre_service.remove(genre):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Genre still has movies and cannot be removed"
        )
    return None
