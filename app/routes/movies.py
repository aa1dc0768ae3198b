"""
Movie Routes - catalog entries
"""

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from app.schemas.movie import MovieAdd, MovieEdit, MovieResult, to_movie
from app.services.movie_service import MovieService
from app.utils.dependencies import clean_search_text, get_movie_service

router = APIRouter(prefix="/api/movies", tags=["Movies"])


# ============================================
# Reads
# ============================================

@router.get("/", response_model=List[MovieResult])
def get_all_movies(movie_service: MovieService = Depends(get_movie_service)):
    """All movies ordered by title, with their genre name"""
    return movie_service.get_all()


@router.get("/get-movies-by-genre/{genre_id}", response_model=List[MovieResult])
def get_movies_by_genre(genre_id: int, movie_service: MovieService = Depends(get_movie_service)):
    movies = movie_service.get_movies_by_genre(genre_id)
    if not movies:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No movie was found")
    return movies


@router.get("/search/{title}", response_model=List[MovieResult])
def search_movies(title: str, movie_service: MovieService = Depends(get_movie_service)):
    """Movies whose title contains the given text"""
    movies = movie_service.search(clean_search_text(title))
    if not movies:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No movie was found")
    return movies


@router.get("/search-movie-with-genre/{value}", response_model=List[MovieResult])
def search_movies_with_genre(value: str, movie_service: MovieService = Depends(get_movie_service)):
    """
    Movies matching the text in title, director, description or genre title

    Matching is a substring match; case handling follows the database collation.
    """
    movies = movie_service.search_with_genre(clean_search_text(value))
    if not movies:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No movie was found")
    return movies


@router.get("/{id}", response_model=MovieResult)
def get_movie(id: int, movie_service: MovieService = Depends(get_movie_service)):
    movie = movie_service.get_by_id(id)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")
    return movie


# ============================================
# Writes
# ============================================

@router.post("/", response_model=MovieResult)
def add_movie(movie_data: MovieAdd, movie_service: MovieService = Depends(get_movie_service)):
    """
    Add a movie

    - **genre_id**: must reference an existing genre
    - **title**: 2-150 characters, unique across movies
    - **director**: 2-150 characters
    - **description**: optional, up to 350 characters
    """
    movie = movie_service.add(to_movie(movie_data))
    if movie is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Movie title already exists")
    # Read back so the response carries the genre name
    return movie_service.get_by_id(movie.id)


@router.put("/{id}", response_model=MovieResult)
def update_movie(
    id: int,
    movie_data: MovieEdit,
    movie_service: MovieService = Depends(get_movie_service)
):
    """Overwrite a movie. The id in the body must match the path."""
    if id != movie_data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Path id and body id differ")

    if movie_service.get_by_id(id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")

    movie = movie_service.update(to_movie(movie_data))
    if movie is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Movie title already exists")
    return movie_service.get_by_id(movie.id)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_movie(id: int, movie_service: MovieService = Depends(get_movie_service)):
    movie = movie_service.get_by_id(id)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")

    movie_service.remove(movie)
    return None
