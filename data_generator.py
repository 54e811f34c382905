"""
Test data for the Books and Authors suites.

Every value is built fresh per call. Ids come from a small random range, so two
calls can collide; the duplicate-id scenarios rely on that being allowed.
"""
import random
import time
from datetime import datetime

from models import Author, Book

MAX_INT = 2**31 - 1

_random = random.Random()


def now_iso() -> str:
    return datetime.now().isoformat()


def timestamp_ms() -> int:
    return int(time.time() * 1000)


def random_id() -> int:
    return _random.randrange(10000)


def book_with_id(book_id: int) -> Book:
    return Book(
        id=book_id,
        title=f"Test Book {book_id}",
        description=f"This is a test book description for book {book_id}",
        page_count=100 + _random.randrange(900),
        excerpt=f"This is an excerpt from test book {book_id}",
        publish_date=now_iso(),
    )


def random_book() -> Book:
    return book_with_id(random_id())


def invalid_book() -> Book:
    return Book(id=-1, title="", description=None, page_count=-100, excerpt=None, publish_date="invalid-date")


def author_with_id(author_id: int) -> Author:
    return Author(
        id=author_id,
        id_book=_random.randrange(200),
        first_name=f"FirstName{author_id}",
        last_name=f"LastName{author_id}",
    )


def random_author() -> Author:
    return author_with_id(random_id())


def invalid_author() -> Author:
    return Author(id=-1, id_book=-1, first_name="", last_name=None)


_BUILDERS = {
    Book: book_with_id,
    Author: author_with_id,
}


def with_id(kind, resource_id: int):
    """with_id(Book, 5) / with_id(Author, 5)"""
    try:
        builder = _BUILDERS[kind]
    except KeyError:
        raise TypeError(f"No test data builder for {kind!r}") from None
    return builder(resource_id)


def random_valid(kind):
    return with_id(kind, random_id())


def long_string(length: int) -> str:
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    return "a" * length
