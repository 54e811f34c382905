from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    # Unset fields are left out of the JSON body entirely rather than sent as null.
    return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class Book:
    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    page_count: Optional[int] = None
    excerpt: Optional[str] = None
    publish_date: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return _drop_none({
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "pageCount": self.page_count,
            "excerpt": self.excerpt,
            "publishDate": self.publish_date,
        })

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Book":
        return cls(
            id=data.get("id"),
            title=data.get("title"),
            description=data.get("description"),
            page_count=data.get("pageCount"),
            excerpt=data.get("excerpt"),
            publish_date=data.get("publishDate"),
        )

    def with_changes(self, **changes) -> "Book":
        return replace(self, **changes)


@dataclass(frozen=True)
class Author:
    id: Optional[int] = None
    id_book: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return _drop_none({
            "id": self.id,
            "idBook": self.id_book,
            "firstName": self.first_name,
            "lastName": self.last_name,
        })

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Author":
        return cls(
            id=data.get("id"),
            id_book=data.get("idBook"),
            first_name=data.get("firstName"),
            last_name=data.get("lastName"),
        )

    def with_changes(self, **changes) -> "Author":
        return replace(self, **changes)


def to_payload(body: Any) -> Any:
    """Model instances go through to_payload(); anything else is sent as given."""
    if hasattr(body, "to_payload"):
        return body.to_payload()
    return body
