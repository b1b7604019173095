import pytest

from drupal_jekyll.utils.slugs import slugify


def test_worked_example():
    assert slugify("  Hello, World & Friends.txt ") == "hello-world-and-friendstxt"


def test_simple_title():
    assert slugify("My First Post!") == "my-first-post"


def test_html_entity_ampersand_becomes_and():
    assert slugify("Tom &amp; Jerry") == "tom-and-jerry"


def test_slashes_and_backslashes_become_dashes():
    assert slugify("either/or\\both") == "either-or-both"


def test_underscore_and_dash_runs_collapse():
    assert slugify("a__b--c_-d") == "a-b-c-d"


def test_leading_and_trailing_separators_are_stripped():
    assert slugify("_-- spaced out --_") == "spaced-out"


def test_title_without_word_characters_gives_empty_slug():
    assert slugify("!!! ???") == ""
    assert slugify("") == ""


@pytest.mark.parametrize(
    "title",
    [
        "  Hello, World & Friends.txt ",
        "Ünïcode Títle — with dashes",
        "multiple   spaces\tand\ttabs",
        "__private_name__",
        "C:\\path\\to/file.tar.gz",
        "A & B &amp; C",
    ],
)
def test_slug_shape_and_idempotence(title):
    slug = slugify(title)
    assert slugify(slug) == slug
    assert not any(ch.isspace() for ch in slug)
    assert not slug.startswith(("-", "_"))
    assert not slug.endswith(("-", "_"))
    for run in ("--", "__", "-_", "_-"):
        assert run not in slug
