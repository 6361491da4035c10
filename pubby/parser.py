"""Reading the table of contents and chapters of an EPUB archive."""

from __future__ import annotations

import xml.etree.ElementTree as ET
import zipfile
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Union

CONTAINER_PATH = "META-INF/container.xml"
TOC_NAME = "toc.ncx"
DEFAULT_PATH = "./sv.epub"
OEBPS_ROOT = "OEBPS/"


class EpubError(Exception):
    """Raised when an EPUB archive or one of its documents cannot be read."""


@dataclass(frozen=True)
class TocEntry:
    """One entry of the table of contents: its label and the file it points to."""

    entry: str
    file: str


@dataclass
class Chapter:
    """The title and the plain text of one chapter."""

    title: str
    text: str


def _local(tag: object) -> str:
    """Return an element or attribute name without its namespace."""
    if not isinstance(tag, str):
        return ""
    return tag.rpartition("}")[2]


def _parse(data: bytes) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        raise EpubError(f"couldn't parse document: {exc}") from exc


def _child(node: ET.Element, name: str) -> ET.Element | None:
    return next((child for child in node if _local(child.tag) == name), None)


def parse_container(data: bytes) -> str:
    """Return the full-path of the package document named in container.xml."""
    root = _parse(data)
    rootfiles = _child(root, "rootfiles")
    rootfile = _child(rootfiles, "rootfile") if rootfiles is not None else None
    if rootfile is not None:
        for name, value in rootfile.attrib.items():
            if _local(name) == "full-path":
                return value
    raise EpubError("invalid container file")


def _toc_entries(node: ET.Element) -> Iterator[TocEntry]:
    children = list(node)
    if len(children) >= 2 and len(children[0]) > 0:
        label = children[0][0]
        content = children[1]
        if _local(content.tag) == "content" and content.attrib:
            source = next(iter(content.attrib.values()))
            yield TocEntry((label.text or "").strip(), source)
    for child in children:
        yield from _toc_entries(child)


def parse_toc(data: bytes) -> list[TocEntry]:
    """Return the entries of an NCX table of contents in document order."""
    return list(_toc_entries(_parse(data)))


def parse_chapter(data: bytes) -> Chapter:
    """Collect the title and the text of every leaf element of a chapter."""
    root = _parse(data)
    title = ""
    parts: list[str] = []
    for node in root.iter():
        if len(node):
            continue
        text = (node.text or "").strip()
        if _local(node.tag) == "title":
            title = text
        else:
            parts.append(text)
    body = "\n\n".join(parts) + "\n" if parts else ""
    return Chapter(title, body)


class Epub:
    """An open EPUB archive."""

    def __init__(self, path: Union[str, PathLike] = DEFAULT_PATH) -> None:
        try:
            self._zip = zipfile.ZipFile(path)
        except (OSError, zipfile.BadZipFile) as exc:
            raise EpubError(f"cannot open epub file {path}") from exc
        try:
            self.opf_path = self.read_container()
        except Exception:
            self._zip.close()
            raise
        self.root = OEBPS_ROOT if "OEBPS" in self.opf_path else ""

    def read_file(self, name: str) -> bytes:
        """Return the bytes of a file stored in the archive."""
        try:
            return self._zip.read(name)
        except KeyError as exc:
            raise EpubError(f"file {name} not found") from exc

    def read_container(self) -> str:
        """Return the path of the package document."""
        return parse_container(self.read_file(CONTAINER_PATH))

    def read_toc(self) -> list[TocEntry]:
        """Return the table of contents."""
        return parse_toc(self.read_file(self.root + TOC_NAME))

    def read_chapter(self, file_name: str) -> Chapter:
        """Read a chapter named by a table-of-contents entry; a fragment is ignored."""
        path = file_name.partition("#")[0]
        return parse_chapter(self.read_file(self.root + path))

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "Epub":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()