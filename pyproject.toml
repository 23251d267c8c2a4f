[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "docsearch"
version = "1.0.0"
description = "Document loading, text normalisation and exact pattern search (KMP, Shift-And, Shift-Or) over text and HTML corpora"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "kmp", "shift-and", "shift-or", "trie", "hash-table", "text", "corpus", "normalization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
docsearch = "docsearch.cli:main"

[tool.setuptools.packages.find]
include = ["docsearch*"]

[tool.pytest.ini_options]
addopts = "-ra"
