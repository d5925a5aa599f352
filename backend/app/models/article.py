"""
ArticleDesk Backend — Article Entity
======================================

What:  The Article record as the store holds it.
Why:   The entity is kept apart from the API schemas (app/schemas/article.py) so
       it can gain fields (e.g., a creation timestamp) without changing the
       form contract.
Who:   Owned exclusively by the ArticleStore; services receive copies.

Lifecycle:
    1. Seeded at startup (three demo records) or created by the save handler
    2. Updated in place by the save handler (title, content, author)
    3. Never deleted
"""

from dataclasses import dataclass


@dataclass
class Article:
    """A single article record. `id` is assigned by the store."""

    id: int
    title: str = ""
    content: str = ""
    author: str = ""


# ── Demo Data ─────────────────────────────────────────────────────────────
# Loaded into the in-memory store when settings.seed_demo_articles is on
SEED_ARTICLES = (
    Article(
        id=1,
        title="Introduction to FastAPI",
        content="FastAPI is a modern framework for building APIs with Python...",
        author="Jan Novák",
    ),
    Article(
        id=2,
        title="Path operations and handlers",
        content="Each handler function maps one HTTP method and path...",
        author="Petra Svobodová",
    ),
    Article(
        id=3,
        title="Working with Pydantic models",
        content="Pydantic validates incoming data against type hints...",
        author="Martin Dvořák",
    ),
)
