import asyncio

import pytest

from book_store_api.app.core.exceptions import NotFoundError, ValidationError
from book_store_api.app.schemas.book import BookCreate, CommentCreate
from book_store_api.app.services.book_service import BookService


def run(coro):
    return asyncio.run(coro)


def create(title):
    return run(BookService.create_book(BookCreate(title=title)))


def test_create_and_get_book():
    created = create("Moby Dick")
    book = run(BookService.get_book(created.id))
    assert book.id == created.id
    assert book.title == "Moby Dick"
    assert book.comments == []


@pytest.mark.parametrize("title", [None, ""])
def test_create_without_title_leaves_store_unchanged(store, title):
    with pytest.raises(ValidationError) as exc_info:
        create(title)
    assert exc_info.value.message == "missing required field title"
    assert len(store) == 0


def test_list_books_reports_live_comment_count():
    first = create("First")
    create("Second")
    run(BookService.add_comment(first.id, CommentCreate(comment="a")))
    run(BookService.add_comment(first.id, CommentCreate(comment="b")))

    listed = run(BookService.list_books())
    assert [(b.title, b.commentcount) for b in listed] == [("First", 2), ("Second", 0)]


def test_add_comment_checks_comment_before_id():
    with pytest.raises(ValidationError) as exc_info:
        run(BookService.add_comment("not-an-id", CommentCreate(comment="")))
    assert exc_info.value.message == "missing required field comment"


def test_add_comment_unknown_id():
    with pytest.raises(NotFoundError) as exc_info:
        run(BookService.add_comment("not-an-id", CommentCreate(comment="nice")))
    assert exc_info.value.message == "no book exists"


def test_delete_book_twice():
    created = create("Moby Dick")
    assert run(BookService.delete_book(created.id)) == "delete successful"
    with pytest.raises(NotFoundError):
        run(BookService.delete_book(created.id))


def test_delete_all_books():
    create("First")
    create("Second")
    assert run(BookService.delete_all_books()) == "complete delete successful"
    assert run(BookService.list_books()) == []
