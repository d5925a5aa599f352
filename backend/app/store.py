"""
ArticleDesk Backend — Article Record Store
============================================

What:  The store interface for Article records, its in-memory implementation,
       and the FastAPI dependency that hands the store to route handlers.
Why:   Handlers receive an explicitly owned store instead of reaching for
       process-wide state. Swapping in real persistence means writing another
       ArticleStore subclass; no route or service changes.
How:   create_app() builds one store, keeps it on app.state, and
       get_article_store() returns it for each request via Depends().

Ownership:
    The store owns every Article instance. Reads return copies, so a caller
    mutating what it received never changes stored data.

Identifier Policy:
    New ids come from a monotonic counter that starts one past the highest
    seeded id (1 for an empty store). Records are never deleted, so the next
    id always equals max(existing ids) + 1.
"""

import copy
import logging
import threading
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from starlette.requests import Request

from app.models.article import Article

logger = logging.getLogger(__name__)


class ArticleStore(ABC):
    """
    Abstract interface for Article persistence.

    Contract:
        - find_by_id() returns the first record with that id, or None
        - add() assigns the id itself; any id on the given article is ignored
        - update() overwrites title/content/author and returns the new state,
          or None when no record matches
        - Returned Articles are copies owned by the caller
    """

    @abstractmethod
    async def find_by_id(self, article_id: int) -> Optional[Article]:
        """Return a copy of the article with `article_id`, or None."""

    @abstractmethod
    async def list_all(self) -> List[Article]:
        """Return copies of all articles in insertion order."""

    @abstractmethod
    async def add(self, article: Article) -> Article:
        """Store a new article under the next id and return the stored copy."""

    @abstractmethod
    async def update(
        self, article_id: int, title: str, content: str, author: str
    ) -> Optional[Article]:
        """Overwrite the mutable fields of an existing article."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored articles."""


class InMemoryArticleStore(ArticleStore):
    """
    Process-lifetime ArticleStore backed by a list.

    Lookups are linear scans, which is fine for a handful of demo records.
    One lock covers id assignment and mutation so concurrent writers
    cannot mint the same id.
    """

    def __init__(self, seed: Iterable[Article] = ()):
        self._articles: List[Article] = [copy.copy(a) for a in seed]
        ids = [a.id for a in self._articles]
        if len(ids) != len(set(ids)):
            raise ValueError("Seed articles must have unique ids")
        self._next_id = max(ids, default=0) + 1
        self._lock = threading.Lock()

    def _find(self, article_id: int) -> Optional[Article]:
        return next((a for a in self._articles if a.id == article_id), None)

    async def find_by_id(self, article_id: int) -> Optional[Article]:
        article = self._find(article_id)
        return copy.copy(article) if article is not None else None

    async def list_all(self) -> List[Article]:
        return [copy.copy(a) for a in self._articles]

    async def add(self, article: Article) -> Article:
        with self._lock:
            stored = Article(
                id=self._next_id,
                title=article.title,
                content=article.content,
                author=article.author,
            )
            self._next_id += 1
            self._articles.append(stored)
        logger.debug("Stored article %d", stored.id)
        return copy.copy(stored)

    async def update(
        self, article_id: int, title: str, content: str, author: str
    ) -> Optional[Article]:
        with self._lock:
            article = self._find(article_id)
            if article is None:
                return None
            article.title = title
            article.content = content
            article.author = author
            return copy.copy(article)

    async def count(self) -> int:
        return len(self._articles)


# ── FastAPI Dependency ────────────────────────────────────────────────────

def get_article_store(request: Request) -> ArticleStore:
    """
    FastAPI dependency returning the application's article store.

    Usage in routes:
        @router.get("/articles")
        async def list_articles(store: ArticleStore = Depends(get_article_store)):
            ...
    """
    return request.app.state.article_store
