import logging
from typing import Optional

import httpx

from api_helpers import BaseApiClient
from config import ApiConfig
from models import Author, Book

logger = logging.getLogger(__name__)


class BooksApiClient(BaseApiClient):
    """Books endpoints: {api.version}{books.endpoint}[/{id}]"""

    def __init__(self, config: ApiConfig, transport: Optional[httpx.BaseTransport] = None):
        super().__init__(config, transport=transport)
        self.endpoint = config.books_path

    def get_all_books(self) -> httpx.Response:
        logger.info("Retrieving all books")
        return self.get_all(self.endpoint)

    def get_book_by_id(self, book_id: int) -> httpx.Response:
        logger.info(f"Retrieving book with ID: {book_id}")
        return self.get_by_id(self.endpoint, book_id)

    def create_book(self, book: Book) -> httpx.Response:
        logger.info(f"Creating new book: {book.title!r}")
        return self.create(self.endpoint, book)

    def update_book(self, book_id: int, book: Book) -> httpx.Response:
        logger.info(f"Updating book with ID: {book_id}")
        return self.update(self.endpoint, book_id, book)

    def delete_book(self, book_id: int) -> httpx.Response:
        logger.info(f"Deleting book with ID: {book_id}")
        return self.delete_by_id(self.endpoint, book_id)


class AuthorsApiClient(BaseApiClient):
    """Authors endpoints: {api.version}{authors.endpoint}[/{id}]"""

    def __init__(self, config: ApiConfig, transport: Optional[httpx.BaseTransport] = None):
        super().__init__(config, transport=transport)
        self.endpoint = config.authors_path

    def get_all_authors(self) -> httpx.Response:
        logger.info("Retrieving all authors")
        return self.get_all(self.endpoint)

    def get_author_by_id(self, author_id: int) -> httpx.Response:
        logger.info(f"Retrieving author with ID: {author_id}")
        return self.get_by_id(self.endpoint, author_id)

    def create_author(self, author: Author) -> httpx.Response:
        logger.info(f"Creating new author: {author.first_name} {author.last_name}")
        return self.create(self.endpoint, author)

    def update_author(self, author_id: int, author: Author) -> httpx.Response:
        logger.info(f"Updating author with ID: {author_id}")
        return self.update(self.endpoint, author_id, author)

    def delete_author(self, author_id: int) -> httpx.Response:
        logger.info(f"Deleting author with ID: {author_id}")
        return self.delete_by_id(self.endpoint, author_id)
