"""Book schemas — required fields and defaults."""

import pytest
from pydantic import ValidationError

from bookclub.schemas.book import BookCreate


def test_optional_fields_default_to_empty_strings():
    book = BookCreate(title="Dune", author="Herbert")
    assert (book.description, book.isbn, book.cover_url) == ("", "", "")


def test_title_and_author_kept_as_sent():
    book = BookCreate(title="  Dune ", author="Herbert\n")
    assert book.title == "  Dune "
    assert book.author == "Herbert\n"


@pytest.mark.parametrize("field", ["title", "author"])
def test_blank_required_field_rejected(field):
    data = {"title": "Dune", "author": "Herbert", field: "  "}
    with pytest.raises(ValidationError):
        BookCreate(**data)


def test_long_isbn_left_to_the_store():
    assert BookCreate(title="Dune", author="Herbert", isbn="9" * 21).isbn == "9" * 21
