from datetime import date
from unittest.mock import create_autospec

import pytest

from app.models.genre import Genre
from app.models.movie import Movie
from app.repositories.criteria import SearchCriteria
from app.repositories.genre_repository import GenreRepository
from app.repositories.movie_repository import MovieRepository
from app.services.genre_service import GenreService
from app.services.movie_service import MovieService


@pytest.fixture
def movie_repository():
    return create_autospec(MovieRepository, instance=True)


@pytest.fixture
def genre_repository():
    return create_autospec(GenreRepository, instance=True)


@pytest.fixture
def movie_service(movie_repository):
    return MovieService(movie_repository)


@pytest.fixture
def mocked_movie_service():
    return create_autospec(MovieService, instance=True)


@pytest.fixture
def genre_service(genre_repository, mocked_movie_service):
    return GenreService(genre_repository, mocked_movie_service)


def make_movie(id=1, title="Alpha"):
    return Movie(
        id=id,
        title=title,
        director="Some Director",
        description=None,
        price=10.0,
        release_date=date(2020, 1, 1),
        genre_id=1,
    )


# ==================== MOVIE SERVICE ====================

def test_movie_reads_delegate_to_repository(movie_service, movie_repository):
    movies = [make_movie()]
    movie_repository.get_all.return_value = movies
    movie_repository.get_by_id.return_value = None
    movie_repository.get_movies_by_genre.return_value = movies
    movie_repository.search_with_genre.return_value = movies

    assert movie_service.get_all() is movies
    assert movie_service.get_by_id(5) is None
    assert movie_service.get_movies_by_genre(1) is movies
    assert movie_service.search_with_genre("Al") is movies

    movie_repository.get_all.assert_called_once_with()
    movie_repository.get_by_id.assert_called_once_with(5)
    movie_repository.get_movies_by_genre.assert_called_once_with(1)
    movie_repository.search_with_genre.assert_called_once_with("Al")


def test_movie_search_uses_title_contains(movie_service, movie_repository):
    movie_repository.search.return_value = []

    assert movie_service.search("lph") == []
    movie_repository.search.assert_called_once_with(SearchCriteria.title_contains("lph"))


def test_add_movie_with_new_title(movie_service, movie_repository):
    movie = make_movie(id=None)
    movie_repository.search.return_value = []

    assert movie_service.add(movie) is movie
    movie_repository.search.assert_called_once_with(SearchCriteria.title_equals("Alpha"))
    movie_repository.add.assert_called_once_with(movie)


def test_add_movie_with_taken_title_returns_none(movie_service, movie_repository):
    movie_repository.search.return_value = [make_movie(id=3)]

    assert movie_service.add(make_movie(id=None)) is None
    movie_repository.add.assert_not_called()


def test_update_movie_ignores_its_own_title(movie_service, movie_repository):
    movie = make_movie(id=7)
    movie_repository.search.return_value = []

    assert movie_service.update(movie) is movie
    movie_repository.search.assert_called_once_with(SearchCriteria.title_equals("Alpha", exclude_id=7))
    movie_repository.update.assert_called_once_with(movie)


def test_update_movie_to_another_movies_title_returns_none(movie_service, movie_repository):
    movie_repository.search.return_value = [make_movie(id=1)]

    assert movie_service.update(make_movie(id=2)) is None
    movie_repository.update.assert_not_called()


def test_remove_movie_always_succeeds(movie_service, movie_repository):
    movie = make_movie()

    assert movie_service.remove(movie) is True
    movie_repository.remove.assert_called_once_with(movie)


def test_store_failure_propagates_from_movie_service(movie_service, movie_repository):
    movie_repository.search.return_value = []
    movie_repository.add.side_effect = RuntimeError("database is down")

    with pytest.raises(RuntimeError):
        movie_service.add(make_movie(id=None))


# ==================== GENRE SERVICE ====================

def test_genre_reads_delegate_to_repository(genre_service, genre_repository):
    genres = [Genre(id=1, title="Action")]
    genre_repository.get_all.return_value = genres
    genre_repository.get_by_id.return_value = genres[0]
    genre_repository.search.return_value = genres

    assert genre_service.get_all() is genres
    assert genre_service.get_by_id(1) is genres[0]
    assert genre_service.search("Act") is genres
    genre_repository.search.assert_called_once_with(SearchCriteria.title_contains("Act"))


def test_add_genre_with_taken_title_returns_none(genre_service, genre_repository):
    genre_repository.search.return_value = [Genre(id=1, title="Action")]

    assert genre_service.add(Genre(title="Action")) is None
    genre_repository.add.assert_not_called()


def test_add_genre_calls_repository_once(genre_service, genre_repository):
    genre = Genre(title="Action")
    genre_repository.search.return_value = []

    assert genre_service.add(genre) is genre
    genre_repository.add.assert_called_once_with(genre)


def test_update_genre_rejects_duplicate_title(genre_service, genre_repository):
    genre_repository.search.return_value = [Genre(id=1, title="Action")]

    assert genre_service.update(Genre(id=2, title="Action")) is None
    genre_repository.search.assert_called_once_with(SearchCriteria.title_equals("Action", exclude_id=2))
    genre_repository.update.assert_not_called()


def test_update_genre(genre_service, genre_repository):
    genre = Genre(id=2, title="Adventure")
    genre_repository.search.return_value = []

    assert genre_service.update(genre) is genre
    genre_repository.update.assert_called_once_with(genre)


def test_remove_genre_with_movies_is_refused(genre_service, genre_repository, mocked_movie_service):
    genre = Genre(id=4, title="Drama")
    mocked_movie_service.get_movies_by_genre.return_value = [make_movie()]

    assert genre_service.remove(genre) is False
    mocked_movie_service.get_movies_by_genre.assert_called_once_with(4)
    genre_repository.remove.assert_not_called()


def test_remove_genre_without_movies(genre_service, genre_repository, mocked_movie_service):
    genre = Genre(id=4, title="Drama")
    mocked_movie_service.get_movies_by_genre.return_value = []

    assert genre_service.remove(genre) is True
    genre_repository.remove.assert_called_once_with(genre)


def test_genre_service_close_releases_both_sides(genre_service, genre_repository, mocked_movie_service):
    genre_service.close()

    genre_repository.close.assert_called_once_with()
    mocked_movie_service.close.assert_called_once_with()
