"""
ArticleDesk Backend — Article Page Route Handlers
===================================================

What:  HTTP handlers for the article list page and the read-only article view.
How:   Extracts path params and form fields, delegates to ArticleService,
       returns the page state as JSON.
Who:   Called by the page template (or any HTTP client).

Route Inventory:
    GET  /articles              list view
    GET  /articles/new          empty form, editing mode
    GET  /articles/{id}/edit    form pre-filled from the article
    POST /articles              create-or-update from the submitted form
    GET  /articles/{id}         read-only view of one article (404 on miss)
"""

import logging

from fastapi import APIRouter, Depends, Form, Response

from app.exceptions import ValidationError
from app.schemas.article import ArticlePage, ArticleResponse, ErrorResponse
from app.services.article_service import article_service
from app.store import ArticleStore, get_article_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get(
    "",
    response_model=ArticlePage,
    summary="List articles",
    description="Plain page load: returns every stored article in list mode.",
)
async def list_articles(
    store: ArticleStore = Depends(get_article_store),
) -> ArticlePage:
    return await article_service.list_page(store)


@router.get(
    "/new",
    response_model=ArticlePage,
    summary="Start a new article",
    description="Returns an empty form in editing mode. The id is assigned on save.",
)
async def new_article(
    store: ArticleStore = Depends(get_article_store),
) -> ArticlePage:
    return await article_service.new_page(store)


@router.get(
    "/{article_id}/edit",
    response_model=ArticlePage,
    summary="Edit an article",
    description=(
        "Pre-fills the form from the article and switches to editing mode. "
        "An unknown id leaves the page in list mode with a message."
    ),
)
async def edit_article(
    article_id: int,
    store: ArticleStore = Depends(get_article_store),
) -> ArticlePage:
    return await article_service.edit_page(store, article_id)


@router.post(
    "",
    response_model=ArticlePage,
    responses={
        200: {"description": "Article created or updated", "model": ArticlePage},
        400: {"description": "Form contains errors; redisplayed in editing mode", "model": ArticlePage},
    },
    summary="Save an article",
    description=(
        "Form submission. An id matching a stored article updates it; any other "
        "id creates a new article under the next free id."
    ),
)
async def save_article(
    response: Response,
    article_id: str = Form(
        default="0", alias="id", description="Article id (0 or blank for a new article)"
    ),
    title: str = Form(default=""),
    content: str = Form(default=""),
    author: str = Form(default=""),
    store: ArticleStore = Depends(get_article_store),
) -> ArticlePage:
    """
    Create or update an article from the submitted form.

    Fields arrive as raw strings so that malformed values go through the
    page's own validation (generic message, form redisplayed) rather than
    FastAPI's 422 error body.
    """
    form = {"id": article_id, "title": title, "content": content, "author": author}
    try:
        article_input = article_service.bind_input(form)
    except ValidationError as e:
        logger.info("Rejected article form: invalid fields %s", e.context.get("fields"))
        response.status_code = 400
        return await article_service.form_error_page(store, form)

    return await article_service.save(store, article_input)


@router.get(
    "/{article_id}",
    response_model=ArticleResponse,
    responses={
        200: {"description": "The article", "model": ArticleResponse},
        404: {"description": "Article not found", "model": ErrorResponse},
    },
    summary="Read one article",
)
async def read_article(
    article_id: int,
    store: ArticleStore = Depends(get_article_store),
) -> ArticleResponse:
    return await article_service.read(store, article_id)
