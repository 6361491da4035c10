[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pubby"
version = "0.1.0"
description = "A small terminal EPUB reader: table of contents, chapter text and entry filtering"
requires-python = ">=3.10"
dependencies = []
keywords = ["epub", "ebook", "reader", "ncx", "toc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pubby = "pubby.reader:main"

[tool.hatch.build.targets.wheel]
packages = ["pubby"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
