from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.repositories.genre_repository import GenreRepository
from app.repositories.movie_repository import MovieRepository
from app.schemas.validation import SearchQuerySchema
from app.services.genre_service import GenreService
from app.services.movie_service import MovieService

# Request-scoped wiring: every object below shares the request's session,
# which get_db closes when the request ends


def get_movie_repository(db: Session = Depends(get_db)) -> MovieRepository:
    return MovieRepository(db)


def get_genre_repository(db: Session = Depends(get_db)) -> GenreRepository:
    return GenreRepository(db)


def get_movie_service(
    movie_repository: MovieRepository = Depends(get_movie_repository)
) -> MovieService:
    return MovieService(movie_repository)


def get_genre_service(
    genre_repository: GenreRepository = Depends(get_genre_repository),
    movie_service: MovieService = Depends(get_movie_service)
) -> GenreService:
    return GenreService(genre_repository, movie_service)


def clean_search_text(text: str) -> str:
    """Validate search text taken from the URL path"""
    try:
        return SearchQuerySchema(query=text).query
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid search text")
