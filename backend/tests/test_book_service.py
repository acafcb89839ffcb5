from decimal import Decimal

import pytest
from sqlalchemy import func, select

from dtos.internal import CreateBookInput, UpdateBookInput
from exceptions import AuthorNotFoundError, BookNotFoundError, ValidationError
from models import Book as BookModel, book_authors
from services.book_service import BookService

UNKNOWN_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def service(db_session):
    return BookService(db_session)


def _create_input(author_ids, title="X", price=Decimal("10.00"), status="unpublished"):
    return CreateBookInput(title=title, price=price, author_ids=list(author_ids), status=status)


def _update_input(book_id, author_ids, title="X", price=Decimal("10.00"), status="unpublished"):
    return UpdateBookInput(
        book_id=book_id, title=title, price=price, author_ids=list(author_ids), status=status
    )


def _book_count(db_session):
    return db_session.query(BookModel).count()


def _linked_author_ids(db_session, book_id):
    return set(db_session.execute(
        select(book_authors.c.author_id).where(book_authors.c.book_id == book_id)
    ).scalars().all())


def _link_count(db_session):
    return db_session.execute(select(func.count()).select_from(book_authors)).scalar()


class TestCreateBook:
    def test_create_links_authors(self, service, create_author, db_session):
        jane = create_author("Jane Doe")
        john = create_author("John Roe")

        output = service.create_book(_create_input([jane.author_id, john.author_id]))

        assert output.book_id
        assert output.title == "X"
        assert output.price == Decimal("10.00")
        assert output.status == "unpublished"
        assert [a.name for a in output.authors] == ["Jane Doe", "John Roe"]
        assert _linked_author_ids(db_session, output.book_id) == {jane.author_id, john.author_id}

    def test_status_is_case_insensitive(self, service, create_author):
        jane = create_author()
        output = service.create_book(_create_input([jane.author_id], status="PUBLISHED"))
        assert output.status == "published"

    def test_invalid_status_writes_nothing(self, service, create_author, db_session):
        jane = create_author()
        with pytest.raises(ValidationError, match=r"Must be one of \['published', 'unpublished'\]"):
            service.create_book(_create_input([jane.author_id], status="draft"))
        assert _book_count(db_session) == 0

    @pytest.mark.parametrize("overrides", [
        {"title": " "},
        {"price": Decimal("-1")},
        {"author_ids": []},
    ])
    def test_invalid_fields_write_nothing(self, service, create_author, db_session, overrides):
        jane = create_author()
        fields = {"author_ids": [jane.author_id]}
        fields.update(overrides)

        with pytest.raises(ValidationError):
            service.create_book(_create_input(**fields))
        assert _book_count(db_session) == 0

    def test_unknown_author_writes_nothing(self, service, create_author, db_session):
        jane = create_author()

        with pytest.raises(AuthorNotFoundError, match="One or more specified authors could not be found."):
            service.create_book(_create_input([jane.author_id, UNKNOWN_ID]))

        assert _book_count(db_session) == 0
        assert _link_count(db_session) == 0

    def test_repeated_author_id_is_rejected(self, service, create_author, db_session):
        jane = create_author()

        with pytest.raises(AuthorNotFoundError):
            service.create_book(_create_input([jane.author_id, jane.author_id]))
        assert _book_count(db_session) == 0

    def test_link_failure_rolls_back_book(self, service, create_author, db_session, monkeypatch):
        jane = create_author()

        def _fail(book_id, author_ids):
            raise RuntimeError("link insert failed")

        monkeypatch.setattr(service.book_repo, "link_author_list", _fail)

        with pytest.raises(RuntimeError):
            service.create_book(_create_input([jane.author_id]))
        assert _book_count(db_session) == 0


class TestUpdateBook:
    def test_update_replaces_fields_and_authors(self, service, create_author, db_session):
        jane = create_author("Jane Doe")
        john = create_author("John Roe")
        created = service.create_book(_create_input([jane.author_id]))

        output = service.update_book(_update_input(
            created.book_id, [john.author_id], title="Y", price=Decimal("12.34")
        ))

        assert output.book_id == created.book_id
        assert output.title == "Y"
        assert output.price == Decimal("12.34")
        assert [a.name for a in output.authors] == ["John Roe"]
        assert _linked_author_ids(db_session, created.book_id) == {john.author_id}

    def test_update_deduplicates_author_ids(self, service, create_author, db_session):
        jane = create_author("Jane Doe")
        john = create_author("John Roe")
        created = service.create_book(_create_input([jane.author_id]))

        output = service.update_book(_update_input(
            created.book_id, [jane.author_id, jane.author_id, john.author_id]
        ))

        assert len(output.authors) == 2
        assert _linked_author_ids(db_session, created.book_id) == {jane.author_id, john.author_id}

    def test_update_unknown_book(self, service, create_author):
        jane = create_author()
        with pytest.raises(BookNotFoundError, match="Book not found."):
            service.update_book(_update_input(UNKNOWN_ID, [jane.author_id]))

    def test_invalid_status_checked_before_book_lookup(self, service, create_author):
        jane = create_author()
        with pytest.raises(ValidationError):
            service.update_book(_update_input(UNKNOWN_ID, [jane.author_id], status="archived"))

    def test_publish_then_keep_published(self, service, create_author):
        jane = create_author()
        created = service.create_book(_create_input([jane.author_id]))

        published = service.update_book(_update_input(created.book_id, [jane.author_id], status="published"))
        assert published.status == "published"

        again = service.update_book(_update_input(created.book_id, [jane.author_id], status="published"))
        assert again.status == "published"

    def test_published_book_cannot_be_unpublished(self, service, create_author, db_session):
        jane = create_author()
        created = service.create_book(_create_input([jane.author_id], status="published"))

        with pytest.raises(ValidationError, match="Cannot change status from 'published' to 'unpublished'."):
            service.update_book(_update_input(
                created.book_id, [jane.author_id], title="Changed", status="unpublished"
            ))

        stored = db_session.get(BookModel, created.book_id)
        assert stored.status == "published"
        assert stored.title == "X"

    def test_unknown_author_leaves_book_unchanged(self, service, create_author, db_session):
        jane = create_author()
        created = service.create_book(_create_input([jane.author_id]))

        with pytest.raises(AuthorNotFoundError):
            service.update_book(_update_input(
                created.book_id, [jane.author_id, UNKNOWN_ID], title="Changed"
            ))

        stored = db_session.get(BookModel, created.book_id)
        assert stored.title == "X"
        assert _linked_author_ids(db_session, created.book_id) == {jane.author_id}

    def test_empty_author_list_rejected(self, service, create_author, db_session):
        jane = create_author()
        created = service.create_book(_create_input([jane.author_id]))

        with pytest.raises(ValidationError):
            service.update_book(_update_input(created.book_id, []))
        assert _linked_author_ids(db_session, created.book_id) == {jane.author_id}

    def test_update_with_same_values_is_idempotent(self, service, create_author):
        jane = create_author("Jane Doe")
        john = create_author("John Roe")
        created = service.create_book(_create_input([jane.author_id, john.author_id]))

        first = service.update_book(_update_input(created.book_id, [jane.author_id, john.author_id]))
        second = service.update_book(_update_input(created.book_id, [jane.author_id, john.author_id]))

        assert first == second == created
