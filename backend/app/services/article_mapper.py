"""
Explicit field mapping between the Article entity and its API shapes.

One function per direction, so a field added to either side shows up here
instead of silently going missing.
"""

from app.models.article import Article
from app.schemas.article import ArticleInput, ArticleResponse


def article_to_input(article: Article) -> ArticleInput:
    """Entity → transfer shape (form pre-fill)."""
    return ArticleInput(
        id=article.id,
        title=article.title,
        content=article.content,
        author=article.author,
    )


def input_to_article(article_input: ArticleInput) -> Article:
    """Transfer shape → new entity. The store assigns the real id on add()."""
    return Article(
        id=0,
        title=article_input.title,
        content=article_input.content,
        author=article_input.author,
    )


def article_to_response(article: Article) -> ArticleResponse:
    """Entity → read-only view."""
    return ArticleResponse(
        id=article.id,
        title=article.title,
        content=article.content,
        author=article.author,
    )
