import zipfile

import pytest

from gadgetry.zip_update import ZipUpdateError, update_zip

MIMETYPE_BODY = b"application/epub+zip"


@pytest.fixture
def epub(tmp_path):
    path = tmp_path / "book.epub"
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("mimetype", MIMETYPE_BODY)
        archive.writestr("OEBPS/chapter1.xhtml", b"<p>one</p>")
        archive.writestr("OEBPS/chapter2.xhtml", b"<p>two</p>")
    return path


def _rewrite_chapter1(contents, writer):
    writer.writestr("OEBPS/chapter1.xhtml", contents["OEBPS/chapter1.xhtml"].upper())
    return ["OEBPS/chapter1.xhtml"]


def test_operation_output_replaces_entry(epub):
    update_zip(epub, _rewrite_chapter1)
    with zipfile.ZipFile(epub) as archive:
        assert archive.read("OEBPS/chapter1.xhtml") == b"<P>ONE</P>"
        assert archive.read("OEBPS/chapter2.xhtml") == b"<p>two</p>"


def test_mimetype_first_and_stored(epub):
    update_zip(epub, _rewrite_chapter1)
    with zipfile.ZipFile(epub) as archive:
        first = archive.infolist()[0]
        assert first.filename == "mimetype"
        assert first.compress_type == zipfile.ZIP_STORED
        assert archive.read("mimetype") == MIMETYPE_BODY


def test_untouched_entries_are_deflated_and_not_duplicated(epub):
    update_zip(epub, _rewrite_chapter1)
    with zipfile.ZipFile(epub) as archive:
        names = archive.namelist()
        assert sorted(names) == sorted(set(names))
        assert set(names) == {"mimetype", "OEBPS/chapter1.xhtml", "OEBPS/chapter2.xhtml"}
        info = archive.getinfo("OEBPS/chapter2.xhtml")
        assert info.compress_type == zipfile.ZIP_DEFLATED


def test_original_is_kept_and_temp_removed(epub):
    before = epub.read_bytes()
    update_zip(epub, _rewrite_chapter1)
    original = epub.with_name(epub.name + ".original")
    assert original.read_bytes() == before
    assert not epub.with_name(epub.name + ".temp").exists()


def test_operation_receives_all_contents_and_unhandled_entries_are_copied(epub):
    seen = {}

    def record(contents, writer):
        seen.update(contents)
        return []

    update_zip(epub, record)
    assert seen["OEBPS/chapter2.xhtml"] == b"<p>two</p>"
    assert seen["mimetype"] == MIMETYPE_BODY
    with zipfile.ZipFile(epub) as archive:
        assert sorted(archive.namelist()) == [
            "OEBPS/chapter1.xhtml",
            "OEBPS/chapter2.xhtml",
            "mimetype",
        ]
        assert archive.read("OEBPS/chapter1.xhtml") == b"<p>one</p>"
        assert archive.read("OEBPS/chapter2.xhtml") == b"<p>two</p>"


def test_missing_source_raises(tmp_path):
    with pytest.raises(ZipUpdateError, match="failed to get zip contents"):
        update_zip(tmp_path / "absent.epub", _rewrite_chapter1)


def test_operation_error_leaves_source_in_place(epub):
    before = epub.read_bytes()

    def fail(contents, writer):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        update_zip(epub, fail)
    assert epub.read_bytes() == before
    assert not epub.with_name(epub.name + ".original").exists()