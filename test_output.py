#!/usr/bin/env python3
"""
Tests for the text/docx writers and the route manifest.
"""

import os

from docx import Document

from sitescribe.core.converter import convert_html, heading, image, link, list_item, paragraph
from sitescribe.core.document_writer import DocumentWriter
from sitescribe.utils.file_manager import FileManager
from sitescribe.utils.manifest import Manifest


def test_relative_path_from_route():
    assert FileManager.relative_path_from_route("/foo/bar") == os.path.join("foo", "bar")
    assert FileManager.relative_path_from_route("/about") == "about"
    # Traversal segments are kept verbatim
    assert FileManager.relative_path_from_route("/a/../b") == os.path.join("a", "..", "b")


def test_trailing_slash_and_root_routes():
    assert FileManager.relative_path_from_route("/about/") == "about"
    assert FileManager.relative_path_from_route("/docs//intro/") == os.path.join("docs", "intro")
    assert FileManager.relative_path_from_route("/") == "index"
    assert FileManager.relative_path_from_route("") == "index"


def test_root_route_is_not_a_hidden_file(tmp_path):
    files = FileManager(str(tmp_path))

    assert files.get_file_paths("/") == (
        os.path.join(str(tmp_path), "txt", "index.txt"),
        os.path.join(str(tmp_path), "docx", "index.docx"),
    )
    txt_path, _ = files.get_file_paths("/about/")
    assert txt_path == os.path.join(str(tmp_path), "txt", "about.txt")


def test_file_paths_share_relative_path(tmp_path):
    files = FileManager(str(tmp_path))
    txt_path, docx_path = files.get_file_paths("/foo/bar")

    assert txt_path == os.path.join(str(tmp_path), "txt", "foo", "bar.txt")
    assert docx_path == os.path.join(str(tmp_path), "docx", "foo", "bar.docx")


def test_save_content_writes_both_formats(tmp_path):
    files = FileManager(str(tmp_path))
    content = "<h1>Title</h1><p>Some text</p><ul><li>Item</li></ul>"

    txt_path, docx_path = files.save_content("/foo/bar", content, "https://example.com")

    with open(txt_path, encoding='utf-8') as f:
        assert f.read() == f"URL: https://example.com/foo/bar\n\n{content}"

    doc = Document(docx_path)
    texts = [p.text for p in doc.paragraphs]
    assert texts == ["URL: https://example.com/foo/bar", "Title", "Some text", "Item"]


def test_control_characters_do_not_break_docx(tmp_path):
    files = FileManager(str(tmp_path))
    content = "<h1>Form\x0bfeed</h1><p>Page\x0cbreak</p><ul><li>Bell\x07</li></ul>"

    txt_path, docx_path = files.save_content("/page", content, "https://example.com")

    assert txt_path is not None
    assert docx_path is not None
    texts = [p.text for p in Document(docx_path).paragraphs]
    assert texts == ["URL: https://example.com/page", "Formfeed", "Pagebreak", "Bell"]

    header = DocumentWriter().build_document("URL: x\x00\x1f", []).paragraphs[0]
    assert header.text == "URL: x"


def test_save_content_logs_and_returns_none_on_failure(tmp_path, caplog):
    blocker = tmp_path / "txt"
    blocker.write_text("a file where a directory should be")
    files = FileManager(str(tmp_path))

    with caplog.at_level("ERROR", logger="sitescribe"):
        txt_path, docx_path = files.save_content("/page", "<p>x</p>", "https://example.com")

    assert txt_path is None
    assert docx_path is not None
    assert "Error saving TXT content" in caplog.text


def test_reset_output_directory(tmp_path):
    root = tmp_path / "data"
    (root / "docx" / "old").mkdir(parents=True)
    (root / "docx" / "old" / "page.docx").write_bytes(b"stale")
    files = FileManager(str(root))

    assert files.reset_output_directory() is True

    assert (root / "txt").is_dir()
    assert (root / "docx").is_dir()
    assert list((root / "docx").iterdir()) == []


def test_document_header_is_bold():
    doc = DocumentWriter().build_document("URL: https://example.com/x", [])
    header = doc.paragraphs[0]

    assert header.text == "URL: https://example.com/x"
    assert len(header.runs) == 1
    assert header.runs[0].bold is True


def test_document_block_styles():
    blocks = [
        heading("Main", 1),
        heading("Sub", 2),
        heading("Minor", 3),
        paragraph("Plain"),
        link("Docs", "/docs"),
        image("/logo.png"),
        list_item("Bullet", ordered=False),
        list_item("Step", ordered=True),
    ]
    doc = DocumentWriter().build_document("URL: x", blocks)
    body = doc.paragraphs[1:]

    assert [p.text for p in body] == [
        "Main", "Sub", "Minor", "Plain", "Docs (/docs)", "Image: /logo.png", "Bullet", "Step",
    ]
    assert [p.style.name for p in body] == [
        "Heading 1", "Heading 2", "Heading 3", "Normal", "Normal", "Normal",
        "List Bullet", "List Number",
    ]
    for p in body[3:6]:
        assert len(p.runs) == 1


def test_write_document_creates_parent_directories(tmp_path):
    target = tmp_path / "deep" / "nested" / "page.docx"
    DocumentWriter().write_document("URL: x", convert_html("<p>Hi</p>"), str(target))

    assert target.exists()
    assert [p.text for p in Document(str(target)).paragraphs] == ["URL: x", "Hi"]


def test_manifest_writes_one_route_per_line(tmp_path):
    manifest = Manifest(str(tmp_path))

    path = manifest.write(["/a", "/b/c", "/d"])

    assert path == os.path.join(str(tmp_path), "routes.txt")
    with open(path, encoding='utf-8') as f:
        assert f.read() == "/a\n/b/c\n/d"


def test_manifest_empty_crawl(tmp_path):
    manifest = Manifest(str(tmp_path))
    path = manifest.write([])

    with open(path, encoding='utf-8') as f:
        assert f.read() == ""
