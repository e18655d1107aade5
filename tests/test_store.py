import threading

from book_store_api.app.core.store import BookStore


def test_add_assigns_unique_ids():
    store = BookStore()
    ids = {store.add(f"Book {i}").id for i in range(200)}
    assert len(ids) == 200
    assert len(store) == 200


def test_add_retries_on_id_collision():
    ids = iter(["dup", "dup", "fresh"])
    store = BookStore(id_factory=lambda: next(ids))
    first = store.add("First")
    second = store.add("Second")
    assert first.id == "dup"
    assert second.id == "fresh"


def test_all_preserves_insertion_order():
    store = BookStore()
    titles = ["C", "A", "B"]
    for title in titles:
        store.add(title)
    assert [book.title for book in store.all()] == titles


def test_add_comment_appends_in_order():
    store = BookStore()
    book = store.add("Moby Dick")
    store.add_comment(book.id, "a")
    updated = store.add_comment(book.id, "b")
    assert updated.comments == ["a", "b"]
    assert store.get(book.id).comment_count == 2


def test_add_comment_unknown_id():
    assert BookStore().add_comment("missing", "a") is None


def test_returned_books_are_copies():
    store = BookStore()
    book = store.add("Moby Dick")
    book.comments.append("sneaky")
    assert store.get(book.id).comments == []


def test_remove_and_clear():
    store = BookStore()
    book = store.add("Moby Dick")
    store.add("Dune")
    assert store.remove(book.id) is True
    assert store.remove(book.id) is False
    assert book.id not in store
    assert store.clear() == 1
    assert store.all() == []


def test_concurrent_comments_are_all_kept():
    store = BookStore()
    book = store.add("Moby Dick")

    def worker(n):
        for i in range(50):
            store.add_comment(book.id, f"{n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    comments = store.get(book.id).comments
    assert len(comments) == 400
    for n in range(8):
        mine = [c for c in comments if c.startswith(f"{n}-")]
        assert mine == [f"{n}-{i}" for i in range(50)]
