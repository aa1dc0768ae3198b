"""
Genre Service - business rules for genres

Two rules sit on top of the repository:
- titles are unique across genres
- a genre that still has movies cannot be removed
Both are reported through the return value (None / False), never raised.
"""

import logging
from typing import List, Optional

from app.models.genre import Genre
from app.repositories.criteria import SearchCriteria
from app.repositories.genre_repository import GenreRepository
from app.services.movie_service import MovieService

logger = logging.getLogger(__name__)


class GenreService:
    """Service for genre operations"""

    def __init__(self, genre_repository: GenreRepository, movie_service: MovieService):
        self.genre_repository = genre_repository
        self.movie_service = movie_service

    def get_all(self) -> List[Genre]:
        return self.genre_repository.get_all()

    def get_by_id(self, id: int) -> Optional[Genre]:
        return self.genre_repository.get_by_id(id)

    def add(self, genre: Genre) -> Optional[Genre]:
        """Add a genre; None when the title is already used"""
        if self.genre_repository.search(SearchCriteria.title_equals(genre.title)):
            logger.info(f"Rejected new genre: title '{genre.title}' already exists")
            return None

        self.genre_repository.add(genre)
        logger.info(f"Genre {genre.id} '{genre.title}' added")
        return genre

    def update(self, genre: Genre) -> Optional[Genre]:
        """Update a genre; None when another genre already has the title"""
        duplicates = self.genre_repository.search(
            SearchCriteria.title_equals(genre.title, exclude_id=genre.id)
        )
        if duplicates:
            logger.info(f"Rejected update of genre {genre.id}: title '{genre.title}' already exists")
            return None

        self.genre_repository.update(genre)
        logger.info(f"Genre {genre.id} updated")
        return genre

    def remove(self, genre: Genre) -> bool:
        """
        Remove a genre that no movie references

        Returns:
            False (and nothing deleted) while movies still belong to the genre
        """
        genre_id = genre.id
        movies = self.movie_service.get_movies_by_genre(genre_id)
        if movies:
            logger.info(f"Genre {genre_id} not removed: {len(movies)} movie(s) still use it")
            return False

        self.genre_repository.remove(genre)
        logger.info(f"Genre {genre_id} removed")
        return True

    def search(self, title: str) -> List[Genre]:
        return self.genre_repository.search(SearchCriteria.title_contains(title))

    def close(self) -> None:
        self.genre_repository.close()
        self.movie_service.close()
