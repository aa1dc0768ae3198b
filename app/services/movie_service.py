"""
Movie Service - business rules for the movie catalog
Titles are unique across movies; everything else is handed to the repository
"""

import logging
from typing import List, Optional

from app.models.movie import Movie
from app.repositories.criteria import SearchCriteria
from app.repositories.movie_repository import MovieRepository

logger = logging.getLogger(__name__)


class MovieService:
    """Service for movie operations"""

    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    def get_all(self) -> List[Movie]:
        return self.movie_repository.get_all()

    def get_by_id(self, id: int) -> Optional[Movie]:
        return self.movie_repository.get_by_id(id)

    def add(self, movie: Movie) -> Optional[Movie]:
        """
        Add a movie unless another one already has its title

        Returns:
            The stored movie, or None when the title is taken
        """
        if self.movie_repository.search(SearchCriteria.title_equals(movie.title)):
            logger.info(f"Rejected new movie: title '{movie.title}' already exists")
            return None

        self.movie_repository.add(movie)
        logger.info(f"Movie {movie.id} '{movie.title}' added")
        return movie

    def update(self, movie: Movie) -> Optional[Movie]:
        """Update a movie; None when a different movie already has the title"""
        duplicates = self.movie_repository.search(
            SearchCriteria.title_equals(movie.title, exclude_id=movie.id)
        )
        if duplicates:
            logger.info(f"Rejected update of movie {movie.id}: title '{movie.title}' already exists")
            return None

        self.movie_repository.update(movie)
        logger.info(f"Movie {movie.id} updated")
        return movie

    def remove(self, movie: Movie) -> bool:
        movie_id = movie.id
        self.movie_repository.remove(movie)
        logger.info(f"Movie {movie_id} removed")
        return True

    def get_movies_by_genre(self, genre_id: int) -> List[Movie]:
        return self.movie_repository.get_movies_by_genre(genre_id)

    def search(self, title: str) -> List[Movie]:
        return self.movie_repository.search(SearchCriteria.title_contains(title))

    def search_with_genre(self, text: str) -> List[Movie]:
        return self.movie_repository.search_with_genre(text)

    def close(self) -> None:
        self.movie_repository.close()
