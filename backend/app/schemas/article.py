"""
ArticleDesk Backend — Pydantic Request/Response Schemas
=========================================================

What:  Pydantic models defining the contract between the article pages and clients.
Why:   Input validation, serialization, and OpenAPI doc generation.
How:   FastAPI uses these models to serialize page state and generate docs;
       ArticleService validates form submissions against ArticleInput.

Design Decision:
    Schemas are separate from the Article entity because:
    1. The form contract (ArticleInput) changes independently of the entity
    2. We control exactly what data is exposed
    3. Validation rules live on the transfer shape, not on the stored record
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Transfer Shape — What the edit form sends and is pre-filled with
# ══════════════════════════════════════════════════════════════════════════


class ArticleInput(BaseModel):
    """
    What:  The article form's field set (the transfer shape / DTO).
    Who:   Bound from POST /articles form fields; pre-filled by the edit handler.

    id == 0 means "not assigned yet": the store assigns one on save.
    ArticleInput() is the empty form.
    """
    id: int = Field(default=0, description="Article identifier (0 for a new article)")
    title: str = Field(default="", description="Article title")
    content: str = Field(default="", description="Article body text")
    author: str = Field(default="", description="Author name")


class ArticleForm(ArticleInput):
    """
    What:  ArticleInput plus the rules a submitted form must satisfy.
    Who:   ArticleService.bind_input() validates POST /articles fields with it.

    Every text field is required (blank after trimming is rejected) and the id
    must be a non-negative integer. Page state keeps the plain ArticleInput so
    an invalid submission can be echoed back as-is.
    """
    id: int = Field(default=0, ge=0)
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    author: str = Field(min_length=1)

    model_config = {"str_strip_whitespace": True}


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class ArticleResponse(BaseModel):
    """
    What:  Read-only representation of one article.
    Who:   Returned by GET /articles/{id} and used for list rows.
    """
    id: int = Field(description="Unique article identifier")
    title: str = Field(description="Article title")
    content: str = Field(description="Article body text")
    author: str = Field(description="Author name")

    model_config = {"from_attributes": True}


class ArticlePage(BaseModel):
    """
    What:  State of the article list page after a handler runs.
    Who:   Returned by the list, new, edit and save handlers.

    A template renders the list from `articles`, shows `message` when set,
    and shows the form pre-filled from `input` while `is_editing` is true.
    """
    articles: List[ArticleResponse] = Field(
        default_factory=list, description="All stored articles, in insertion order"
    )
    input: ArticleInput = Field(
        default_factory=ArticleInput, description="Form contents (pre-fill or echoed submission)"
    )
    message: Optional[str] = Field(default=None, description="User-facing status message")
    is_editing: bool = Field(default=False, description="True when the edit form is shown")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "article with ID '42' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    articles: int = Field(description="Number of articles in the store")
    uptime_seconds: float = Field(description="Seconds since service started")
