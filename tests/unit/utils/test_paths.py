"""Tests for route and slug helpers."""

import pytest

from folio.utils.paths import encode_uri, ensure_leading_slash, file_to_path, remove_leading_slash, slugify


@pytest.mark.parametrize(
    ("relative", "expected"),
    [
        ("README.md", "/"),
        ("index.md", "/"),
        ("guide/README.md", "/guide/"),
        ("guide/readme.md", "/guide/"),
        ("guide/getting-started.md", "/guide/getting-started.html"),
        ("components/Layout.vue", "/components/Layout.html"),
        ("guide\\windows.md", "/guide/windows.html"),
    ],
)
def test_file_to_path(relative, expected):
    assert file_to_path(relative) == expected


def test_encode_uri_keeps_reserved_characters():
    assert encode_uri("/guide/a b.html?x=1#top") == "/guide/a%20b.html?x=1#top"


def test_encode_uri_encodes_unicode():
    assert encode_uri("/中文/") == "/%E4%B8%AD%E6%96%87/"


def test_leading_slash_helpers():
    assert ensure_leading_slash("a/b") == "/a/b"
    assert ensure_leading_slash("/a/b") == "/a/b"
    assert remove_leading_slash("/a/b") == "a/b"
    assert remove_leading_slash("a/b") == "a/b"


def test_slugify_basic():
    assert slugify("Hello World!") == "hello-world"
    assert slugify("my-post") == "my-post"


def test_slugify_transliterates_unicode():
    assert slugify("Café à Paris") == "cafe-a-paris"


def test_slugify_keeps_non_latin_letters():
    assert slugify("中文") == "中文"
    assert slugify("日本語") == "日本語"
    assert slugify("安装 指南") == "安装-指南"


def test_slugify_collapses_dashes():
    assert slugify("a - b -- c") == "a-b-c"
    assert slugify("--edge--") == "edge"


def test_slugify_empty_result():
    assert slugify("!!!") == ""
    assert slugify("") == ""
