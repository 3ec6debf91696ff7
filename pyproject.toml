[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vcutil"
version = "0.1.0"
description = "Small utilities for text ranking, collections, caching, conversation memory and numeric helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["bm25", "tfidf", "cache", "utilities", "conversation", "vectors"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vcutil"]

[tool.pytest.ini_options]
addopts = "-ra"
