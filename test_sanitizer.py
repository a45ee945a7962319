#!/usr/bin/env python3
"""
Tests for the allow-list sanitizer.
"""

from bs4 import BeautifulSoup
import pytest

from sitescribe.core.sanitizer import ALLOWED_ATTRIBUTES, ALLOWED_TAGS, ContentSanitizer


MESSY_PAGE = """
<!DOCTYPE html>
<html>
<head><title>Messy</title><style>body { color: red }</style></head>
<body class="page">
  <!-- tracking banner -->
  <h1 id="top" style="font-size: 3em">Welcome</h1>
  <p class="lead" onclick="steal()">Intro <b>bold</b> text</p>
  <script>var secret = 1;</script>
  <img src="/logo.png" alt="Logo" width="20" data-lazy="1">
  <ul><li class="x">One</li><li>Two</li></ul>
  <ol><li>First</li></ol>
  <table><tr><td>Cell text</td></tr></table>
  <div><p>Inside a div</p></div>
</body>
</html>
"""


def _assert_only_allowed(markup):
    soup = BeautifulSoup(markup, 'html.parser')
    for tag in soup.find_all(True):
        assert tag.name in ALLOWED_TAGS, f"unexpected tag {tag.name}"
        allowed = ALLOWED_ATTRIBUTES.get(tag.name, frozenset())
        for attr in tag.attrs:
            assert attr in allowed, f"unexpected attribute {attr} on {tag.name}"


@pytest.mark.parametrize("mode", ["discard", "unwrap"])
def test_output_contains_only_allowed_tags_and_attributes(mode):
    cleaned = ContentSanitizer(mode).sanitize(MESSY_PAGE)
    _assert_only_allowed(cleaned)


def test_discard_removes_whole_subtree():
    cleaned = ContentSanitizer().sanitize(MESSY_PAGE)

    assert "Welcome" in cleaned
    assert "<h1>Welcome</h1>" in cleaned
    assert "Cell text" not in cleaned
    assert "Inside a div" not in cleaned
    # <b> is not allowed, so its text goes with it
    assert "bold" not in cleaned
    assert "Intro" in cleaned


def test_unwrap_keeps_allowed_children():
    cleaned = ContentSanitizer("unwrap").sanitize(MESSY_PAGE)

    assert "<p>Inside a div</p>" in cleaned
    assert "Cell text" in cleaned
    assert "bold" in cleaned
    assert "<div" not in cleaned
    assert "<table" not in cleaned


def test_scripts_styles_and_comments_are_blanked():
    for mode in ("discard", "unwrap"):
        cleaned = ContentSanitizer(mode).sanitize(MESSY_PAGE)
        assert "secret" not in cleaned
        assert "color: red" not in cleaned
        assert "tracking banner" not in cleaned
        assert "Messy" not in cleaned
        assert "DOCTYPE" not in cleaned


def test_image_keeps_src_and_alt_only():
    cleaned = ContentSanitizer().sanitize('<img src="/a.png" alt="A" width="5" class="c">')
    img = BeautifulSoup(cleaned, 'html.parser').find('img')
    assert img.attrs == {'src': '/a.png', 'alt': 'A'}


def test_anchor_is_not_an_allowed_tag():
    cleaned = ContentSanitizer().sanitize('<p>Keep</p><a href="/x">Link</a>')
    assert cleaned == "<p>Keep</p>"


def test_sanitize_is_pure():
    sanitizer = ContentSanitizer()
    assert sanitizer.sanitize(MESSY_PAGE) == sanitizer.sanitize(MESSY_PAGE)
    assert sanitizer.sanitize("") == ""


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        ContentSanitizer("hoist")
