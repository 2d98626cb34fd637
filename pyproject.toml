[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzytrie"
version = "0.1.0"
description = "A trie for autocompletion with fuzzy matching, normalisation and per-entry metadata."
requires-python = ">=3.10"
dependencies = []
keywords = ["trie", "autocomplete", "fuzzy", "levenshtein", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fuzzytrie-demo = "fuzzytrie.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["fuzzytrie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
