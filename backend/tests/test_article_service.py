"""
ArticleDesk Backend — Article Service Unit Tests
==================================================

What:  Tests for ArticleService page logic (list, new, edit, save, read).
How:   Runs against real in-memory stores (no HTTP).

What we test:
    ✅ Edit and read return the exact stored values
    ✅ Edit of a missing id stays in list mode with a message
    ✅ Read of a missing id raises NotFoundError
    ✅ Save updates a matching record, creates max + 1 otherwise
    ✅ Every save ends in list mode
    ✅ New always yields an empty form in editing mode
    ✅ Form binding rejects blank or malformed fields
"""

import pytest

from app.exceptions import NotFoundError, ValidationError
from app.models.article import Article, SEED_ARTICLES
from app.schemas.article import ArticleInput
from app.services.article_mapper import article_to_input, input_to_article
from app.services.article_service import ARTICLE_NOT_FOUND_MESSAGE, FORM_ERRORS_MESSAGE


class TestListAndNew:

    @pytest.mark.asyncio
    async def test_list_page(self, article_service, seeded_store):
        page = await article_service.list_page(seeded_store)

        assert [a.id for a in page.articles] == [1, 2, 3]
        assert page.is_editing is False
        assert page.message is None

    @pytest.mark.asyncio
    async def test_new_page_is_empty_form(self, article_service, seeded_store):
        # Enter editing mode on an existing article first
        await article_service.edit_page(seeded_store, 2)

        page = await article_service.new_page(seeded_store)

        assert page.is_editing is True
        assert page.input == ArticleInput()
        assert page.input.id == 0


class TestEditAndRead:

    @pytest.mark.asyncio
    async def test_edit_prefills_every_stored_article(self, article_service, seeded_store):
        for seed in SEED_ARTICLES:
            page = await article_service.edit_page(seeded_store, seed.id)

            assert page.is_editing is True
            assert page.input == ArticleInput(
                id=seed.id, title=seed.title, content=seed.content, author=seed.author
            )

    @pytest.mark.asyncio
    async def test_edit_missing_stays_in_list_mode(self, article_service, seeded_store):
        page = await article_service.edit_page(seeded_store, 42)

        assert page.is_editing is False
        assert page.message == ARTICLE_NOT_FOUND_MESSAGE
        assert len(page.articles) == 3

    @pytest.mark.asyncio
    async def test_read_returns_stored_values(self, article_service, seeded_store):
        for seed in SEED_ARTICLES:
            article = await article_service.read(seeded_store, seed.id)
            assert (article.id, article.title, article.content, article.author) == (
                seed.id, seed.title, seed.content, seed.author
            )

    @pytest.mark.asyncio
    async def test_read_missing_raises_not_found(self, article_service, seeded_store):
        with pytest.raises(NotFoundError) as exc_info:
            await article_service.read(seeded_store, 42)
        assert exc_info.value.context["resource_id"] == "42"


class TestSave:

    @pytest.mark.asyncio
    async def test_save_existing_id_updates_in_place(self, article_service, seeded_store):
        page = await article_service.save(
            seeded_store, ArticleInput(id=2, title="X", content="Body", author="Author")
        )

        assert page.is_editing is False
        assert page.message == "Article #2 was updated successfully!"
        assert len(page.articles) == 3
        assert await seeded_store.find_by_id(2) == Article(
            id=2, title="X", content="Body", author="Author"
        )
        assert await seeded_store.find_by_id(1) == SEED_ARTICLES[0]

    @pytest.mark.asyncio
    async def test_save_unknown_id_creates_next_id(self, article_service, seeded_store):
        page = await article_service.save(
            seeded_store, ArticleInput(id=99, title="New", content="Body", author="Author")
        )

        assert page.is_editing is False
        assert page.message == "New article #4 was created!"
        assert [a.id for a in page.articles] == [1, 2, 3, 4]
        assert await seeded_store.find_by_id(99) is None

    @pytest.mark.asyncio
    async def test_save_new_article_in_empty_store(self, article_service, empty_store):
        page = await article_service.save(
            empty_store, ArticleInput(id=0, title="First", content="Body", author="Author")
        )

        assert page.message == "New article #1 was created!"
        assert [a.id for a in page.articles] == [1]


class TestFormBinding:

    def test_bind_valid_form(self, article_service):
        article_input = article_service.bind_input(
            {"id": "3", "title": "  Title ", "content": "Body", "author": "Me"}
        )
        assert article_input.id == 3
        assert article_input.title == "Title"

    def test_blank_id_means_new(self, article_service):
        article_input = article_service.bind_input(
            {"id": "", "title": "T", "content": "C", "author": "A"}
        )
        assert article_input.id == 0

    @pytest.mark.parametrize(
        "form",
        [
            {"id": "1", "title": "", "content": "C", "author": "A"},
            {"id": "1", "title": "T", "content": "   ", "author": "A"},
            {"id": "abc", "title": "T", "content": "C", "author": "A"},
            {"id": "-5", "title": "T", "content": "C", "author": "A"},
        ],
    )
    def test_invalid_form_raises(self, article_service, form):
        with pytest.raises(ValidationError) as exc_info:
            article_service.bind_input(form)
        assert exc_info.value.message == FORM_ERRORS_MESSAGE

    @pytest.mark.asyncio
    async def test_form_error_page_echoes_submission(self, article_service, seeded_store):
        page = await article_service.form_error_page(
            seeded_store, {"id": "2", "title": "", "content": "Draft", "author": "Me"}
        )

        assert page.is_editing is True
        assert page.message == FORM_ERRORS_MESSAGE
        assert page.input == ArticleInput(id=2, title="", content="Draft", author="Me")
        assert await seeded_store.count() == 3


class TestMapping:

    def test_article_to_input_copies_every_field(self):
        article = Article(id=7, title="T", content="C", author="A")
        assert article_to_input(article) == ArticleInput(id=7, title="T", content="C", author="A")

    def test_input_to_article_leaves_id_to_store(self):
        article = input_to_article(ArticleInput(id=7, title="T", content="C", author="A"))
        assert article == Article(id=0, title="T", content="C", author="A")
