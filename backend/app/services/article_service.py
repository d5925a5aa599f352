"""
ArticleDesk Backend — Article Service (Page Handler Logic)
============================================================

What:  The logic behind the article pages: list, new, edit, save and read-one.
Why:   Keeps page behavior independent of HTTP so it can be tested with a
       plain store and no client.
How:   Each method receives the ArticleStore for the current request and
       returns the page state (ArticlePage) or a single ArticleResponse.
Who:   Called by the route handlers in app/routes/articles.py.

Page Modes:
    list mode     is_editing=False  → list of articles (+ optional message)
    editing mode  is_editing=True   → form shown, pre-filled from `input`

    GET  /articles            → list mode
    GET  /articles/new        → editing mode, empty form
    GET  /articles/{id}/edit  → editing mode pre-filled, or list mode + message
    POST /articles            → list mode after create/update,
                                editing mode when the form is invalid

Design Decision:
    ArticleService is stateless; the store is passed in for each call.
    The store is the only shared state, and it is owned by the app.
"""

import logging
from typing import Any, Mapping, Optional

import pydantic

from app.exceptions import NotFoundError, ValidationError
from app.schemas.article import ArticleForm, ArticleInput, ArticlePage, ArticleResponse
from app.services.article_mapper import (
    article_to_input,
    article_to_response,
    input_to_article,
)
from app.store import ArticleStore

logger = logging.getLogger(__name__)

ARTICLE_NOT_FOUND_MESSAGE = "Article not found!"
FORM_ERRORS_MESSAGE = "The form contains errors!"


class ArticleService:
    """
    Business logic for the article pages.

    Error Handling Strategy:
        - Edit of a missing article is a user message, not an error
        - Read of a missing article raises NotFoundError (→ 404)
        - An invalid form raises ValidationError from bind_input(); the route
          then renders form_error_page()
    """

    async def _page(
        self,
        store: ArticleStore,
        article_input: Optional[ArticleInput] = None,
        message: Optional[str] = None,
        is_editing: bool = False,
    ) -> ArticlePage:
        articles = [article_to_response(a) for a in await store.list_all()]
        return ArticlePage(
            articles=articles,
            input=article_input if article_input is not None else ArticleInput(),
            message=message,
            is_editing=is_editing,
        )

    async def list_page(self, store: ArticleStore) -> ArticlePage:
        """Plain page load: the full list, no side effects."""
        return await self._page(store)

    async def new_page(self, store: ArticleStore) -> ArticlePage:
        """Empty form in editing mode. No id is assigned until save."""
        return await self._page(store, article_input=ArticleInput(), is_editing=True)

    async def edit_page(self, store: ArticleStore, article_id: int) -> ArticlePage:
        """
        Pre-fill the form from the article with `article_id`.

        On a miss the page stays in list mode with a user-facing message.
        """
        article = await store.find_by_id(article_id)
        if article is None:
            logger.info("Edit requested for missing article %d", article_id)
            return await self._page(store, message=ARTICLE_NOT_FOUND_MESSAGE)

        return await self._page(
            store, article_input=article_to_input(article), is_editing=True
        )

    async def read(self, store: ArticleStore, article_id: int) -> ArticleResponse:
        """
        Return one article for the read-only view.

        Raises:
            NotFoundError: No article has `article_id` (→ 404)
        """
        article = await store.find_by_id(article_id)
        if article is None:
            raise NotFoundError(resource="article", resource_id=str(article_id))
        return article_to_response(article)

    def bind_input(self, form: Mapping[str, Any]) -> ArticleInput:
        """
        Validate submitted form fields into an ArticleInput.

        A blank id means a new article (0).

        Raises:
            ValidationError: Any field is missing, blank, or malformed
        """
        data = dict(form)
        if not str(data.get("id") or "").strip():
            data["id"] = 0
        try:
            return ArticleForm.model_validate(data)
        except pydantic.ValidationError as e:
            raise ValidationError(
                message=FORM_ERRORS_MESSAGE,
                context={"fields": sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})},
            ) from e

    async def form_error_page(
        self, store: ArticleStore, form: Mapping[str, Any]
    ) -> ArticlePage:
        """Redisplay the form in editing mode with the submitted values."""
        echoed = ArticleInput(
            id=_coerce_id(form.get("id")),
            title=str(form.get("title") or "").strip(),
            content=str(form.get("content") or "").strip(),
            author=str(form.get("author") or "").strip(),
        )
        return await self._page(
            store, article_input=echoed, message=FORM_ERRORS_MESSAGE, is_editing=True
        )

    async def save(self, store: ArticleStore, article_input: ArticleInput) -> ArticlePage:
        """
        Create or update an article from a validated form.

        An id matching a stored article overwrites its title, content and
        author. Any other id (including 0) creates a new article under the
        store's next id; the submitted id is not reused.
        The page always returns to list mode.
        """
        updated = await store.update(
            article_input.id,
            title=article_input.title,
            content=article_input.content,
            author=article_input.author,
        )
        if updated is not None:
            logger.info("Article %d updated", updated.id)
            message = f"Article #{updated.id} was updated successfully!"
        else:
            created = await store.add(input_to_article(article_input))
            logger.info("Article %d created", created.id)
            message = f"New article #{created.id} was created!"

        return await self._page(store, message=message, is_editing=False)


def _coerce_id(raw: Any) -> int:
    try:
        return max(int(str(raw).strip()), 0)
    except (TypeError, ValueError):
        return 0


# ── Singleton Instance ────────────────────────────────────────────────────
# ArticleService is stateless; the store is supplied per call
article_service = ArticleService()
