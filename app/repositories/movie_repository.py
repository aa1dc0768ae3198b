"""
Movie repository - generic operations plus genre-aware reads.

The generic repository is held, not inherited: listing and fetching by id
are reimplemented here with the genre joined in, everything else is
forwarded as is.
"""
import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, contains_eager, joinedload

from app.models.genre import Genre
from app.models.movie import Movie
from app.repositories.base import Repository
from app.repositories.criteria import SearchCriteria

logger = logging.getLogger(__name__)


class MovieRepository:
    def __init__(self, db: Session):
        self.db = db
        self._repository = Repository(db, Movie, filterable_fields=("title", "genre_id"))

    def get_all(self) -> List[Movie]:
        """All movies with their genre, ordered by title"""
        return self._repository.read_only(
            lambda: self.db.query(Movie)
            .options(joinedload(Movie.genre))
            .order_by(Movie.title.asc())
            .all()
        )

    def get_by_id(self, id: int) -> Optional[Movie]:
        # populate_existing fills in the genre on a movie this session already holds
        return self._repository.read_only(
            lambda: self.db.query(Movie)
            .options(joinedload(Movie.genre))
            .populate_existing()
            .filter(Movie.id == id)
            .first()
        )

    def get_movies_by_genre(self, genre_id: int) -> List[Movie]:
        return self.search(SearchCriteria.genre_is(genre_id))

    def search_with_genre(self, text: str) -> List[Movie]:
        """
        Movies whose title, director, description or genre title contains `text`.
        A NULL description simply does not match.
        """
        logger.debug(f"Searching movies and genres for '{text}'")
        return self._repository.read_only(
            lambda: self.db.query(Movie)
            .join(Movie.genre)
            .options(contains_eager(Movie.genre))
            .filter(
                or_(
                    Movie.title.contains(text, autoescape=True),
                    Movie.director.contains(text, autoescape=True),
                    Movie.description.contains(text, autoescape=True),
                    Genre.title.contains(text, autoescape=True),
                )
            )
            .all()
        )

    # Generic operations

    def add(self, movie: Movie) -> None:
        self._repository.add(movie)

    def update(self, movie: Movie) -> None:
        self._repository.update(movie)

    def remove(self, movie: Movie) -> None:
        self._repository.remove(movie)

    def search(self, criteria: SearchCriteria) -> List[Movie]:
        return self._repository.search(criteria)

    def save_changes(self) -> None:
        self._repository.save_changes()

    def close(self) -> None:
        self._repository.close()
