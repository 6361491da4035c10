import io
import zipfile

import pytest

from pubby.parser import Epub, EpubError, TocEntry
from pubby.reader import Reader, View, filter_entries, main

CONTAINER = b"""<container><rootfiles>
<rootfile full-path="OEBPS/content.opf"/>
</rootfiles></container>"""

NCX = b"""<ncx><navMap>
<navPoint><navLabel><text>Chapter One</text></navLabel><content src="ch1.xhtml"/></navPoint>
<navPoint><navLabel><text>Epilogue</text></navLabel><content src="missing.xhtml"/></navPoint>
</navMap></ncx>"""

CH1 = b"<html><head><title>First</title></head><body><p>Hello world</p></body></html>"


@pytest.fixture
def book(tmp_path):
    path = tmp_path / "book.epub"
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("META-INF/container.xml", CONTAINER)
        archive.writestr("OEBPS/toc.ncx", NCX)
        archive.writestr("OEBPS/ch1.xhtml", CH1)
    return path


ENTRIES = [
    TocEntry("Chapter One", "a.xhtml"),
    TocEntry("CHAPTER Two", "b.xhtml"),
    TocEntry("Epilogue", "c.xhtml"),
    TocEntry("", "d.xhtml"),
]


def test_filter_is_case_insensitive():
    result = filter_entries(ENTRIES, "chapter")
    assert [e.file for e in result] == ["a.xhtml", "b.xhtml", "d.xhtml"]


def test_filter_empty_text_keeps_all():
    assert filter_entries(ENTRIES, "") == ENTRIES


def test_filter_keeps_empty_labels():
    assert filter_entries(ENTRIES, "zzz") == [TocEntry("", "d.xhtml")]


def test_filter_uses_only_first_hundred_characters():
    long_entry = TocEntry("a" * 100 + "tail", "x.xhtml")
    assert filter_entries([long_entry], "tail") == []
    assert filter_entries([long_entry], "aaa") == [long_entry]


def test_reader_toggle(book):
    with Epub(book) as epub:
        reader = Reader(epub)
        assert reader.view is View.TOC
        assert reader.toggle_toc() is View.TEXT
        assert reader.toggle_toc() is View.TOC


def test_reader_open_chapter(book):
    with Epub(book) as epub:
        reader = Reader(epub)
        chapter = reader.open_chapter(reader.entries[0])
        assert chapter.title == "First"
        assert reader.text == "Hello world\n"
        assert reader.view is View.TEXT


def test_reader_open_missing_chapter(book):
    with Epub(book) as epub:
        reader = Reader(epub)
        with pytest.raises(EpubError):
            reader.open_chapter(reader.entries[1])
        assert reader.view is View.TOC


def test_reader_filter(book):
    with Epub(book) as epub:
        reader = Reader(epub)
        assert reader.filter("EPI") == [TocEntry("Epilogue", "missing.xhtml")]
        assert reader.visible == [TocEntry("Epilogue", "missing.xhtml")]
        assert len(reader.filter("")) == 2


def test_main_lists_and_opens(book, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\nq\n"))
    assert main([str(book)]) == 0
    out = capsys.readouterr().out
    assert "Chapter One" in out
    assert "Hello world" in out


def test_main_missing_book(tmp_path, capsys):
    assert main([str(tmp_path / "absent.epub")]) == 1
    assert "pubby:" in capsys.readouterr().err