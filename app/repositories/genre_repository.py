from app.models.genre import Genre
from app.repositories.base import Repository


class GenreRepository(Repository[Genre]):
    """Genres need nothing beyond the generic operations"""

    model = Genre
    filterable_fields = ("title",)
