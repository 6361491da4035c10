"""A terminal reader that lists the table of contents and shows chapters."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from typing import Iterable, Sequence

from pubby.parser import DEFAULT_PATH, Chapter, Epub, EpubError, TocEntry

LABEL_LIMIT = 100

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class View(Enum):
    """What the reader is showing."""

    TOC = "toc"
    TEXT = "text"


def _label(entry: TocEntry) -> str:
    return entry.entry[:LABEL_LIMIT]


def filter_entries(entries: Iterable[TocEntry], text: str) -> list[TocEntry]:
    """Keep entries whose label holds text, ignoring ASCII case; empty labels always stay."""
    needle = text.translate(_ASCII_LOWER)
    return [
        entry
        for entry in entries
        if not _label(entry) or needle in _label(entry).translate(_ASCII_LOWER)
    ]


class Reader:
    """The state of a reading session over one book."""

    def __init__(self, epub: Epub) -> None:
        self.epub = epub
        self.entries = epub.read_toc()
        self.visible = list(self.entries)
        self.view = View.TOC
        self.title = ""
        self.text = ""

    def toggle_toc(self) -> View:
        """Switch between the table of contents and the text."""
        self.view = View.TOC if self.view is not View.TOC else View.TEXT
        return self.view

    def open_chapter(self, entry: TocEntry) -> Chapter:
        """Load the chapter an entry points to and show its text."""
        chapter = self.epub.read_chapter(entry.file)
        self.title = chapter.title
        self.text = chapter.text
        self.view = View.TEXT
        return chapter

    def filter(self, text: str) -> list[TocEntry]:
        """Restrict the visible entries to those matching text."""
        self.visible = filter_entries(self.entries, text)
        return self.visible


def _show(reader: Reader) -> None:
    if reader.view is View.TOC:
        for number, entry in enumerate(reader.visible):
            print(f"{number:4d}  {_label(entry)}")
    else:
        if reader.title:
            print(reader.title)
            print()
        print(reader.text)


def _run(reader: Reader) -> None:
    _show(reader)
    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if line in ("q", "quit"):
            break
        if line in ("", "toc"):
            reader.toggle_toc()
        elif line.startswith("/"):
            reader.filter(line[1:])
            reader.view = View.TOC
        elif line.isdigit():
            number = int(line)
            if number >= len(reader.visible):
                print(f"no entry {number}", file=sys.stderr)
                continue
            try:
                reader.open_chapter(reader.visible[number])
            except EpubError as exc:
                print(f"pubby: {exc}", file=sys.stderr)
                continue
        else:
            print("commands: <number>, /<text>, toc, q", file=sys.stderr)
            continue
        _show(reader)


def main(argv: Sequence[str] | None = None) -> int:
    """Open a book and read it interactively from standard input."""
    parser = argparse.ArgumentParser(prog="pubby", description="Read an EPUB book.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    try:
        with Epub(args.path) as epub:
            _run(Reader(epub))
    except EpubError as exc:
        print(f"pubby: {exc}", file=sys.stderr)
        return 1
    return 0