# pubby

pubby reads EPUB books. It looks in `META-INF/container.xml` to find the
package document. It reads the table of contents from `toc.ncx`. It can
also give you the plain text of any chapter. The package uses only the
standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pubby path/to/book.epub
```

If you leave out the path, `./sv.epub` is opened.

The reader starts by listing the table of contents with a number on each
entry. It then reads commands from standard input at a `> ` prompt:

- `<number>` opens that entry of the current list and shows the chapter's
  title and text.
- `/<text>` shows only the entries whose label contains `<text>`, ignoring
  ASCII case. Entries with an empty label are always shown. `/` on its own
  shows every entry again.
- `toc`, or an empty line, switches between the contents and the text.
- `q`, `quit` or end of input leaves the reader.

Labels are cut to 100 characters when they are listed and when they are
matched. If the book cannot be opened or its table of contents cannot be
read, `pubby` prints the error and exits with status 1. If a chapter
cannot be read, the error is printed and the reader keeps running.

## Library use

```python
from pubby.parser import Epub, EpubError

with Epub("book.epub") as book:
    toc = book.read_toc()
    for entry in toc:
        print(entry.entry, "->", entry.file)

    chapter = book.read_chapter(toc[0].file)
    print(chapter.title)
    print(chapter.text)
```

`Epub(path)` opens the archive and reads the container file straight
away. The package document path is kept in `opf_path`. If that path
contains `OEBPS`, then `toc.ncx` and the chapter files are looked up under
`OEBPS/`. Otherwise they are looked up at the top of the archive.
`read_file(name)` returns the raw bytes of any file in the archive.
`read_chapter(file_name)` drops any `#fragment` from the name before it
reads the file.

The parsing helpers work on raw bytes, so you can use them without
opening an archive:

- `parse_container(data)` returns the `full-path` of the first
  `rootfiles/rootfile` element.
- `parse_toc(data)` returns a list of `TocEntry(entry, file)` values in
  document order. There is one for each element whose first child has a
  child (the label) and whose second child is a `content` element. The
  file is the value of the first attribute of `content`.
- `parse_chapter(data)` returns a `Chapter(title, text)`. The title is the
  text of a leaf `title` element. The text is the stripped text of every
  other leaf element, joined by blank lines and ended by a newline.

Namespaces are ignored when element and attribute names are matched. A
missing file, a document that cannot be parsed, or a container file with
no `full-path` raises `EpubError`.

`pubby.reader.Reader(epub)` holds the state of a reading session:

- `entries` and `visible`: the full list of entries and the filtered one.
- `view`: a `View`, either `View.TOC` or `View.TEXT`.
- `title` and `text`: the open chapter.

It has these methods:

- `toggle_toc()` switches the view.
- `open_chapter(entry)` loads the chapter for an entry and switches to the
  text.
- `filter(text)` sets `visible`.

`filter_entries(entries, text)` is the matching function that `filter`
uses.

## What it does not do

pubby is a terminal reader only. It has no graphical window. It does not
render HTML: a chapter is shown as plain text with no styling, images or
links. It reads the table of contents only from `toc.ncx`. It does not use
the package document's manifest or spine. There is no bookmarking and no
saved reading position.