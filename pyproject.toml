[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchless"
version = "0.1.0"
description = "Embedded semantic vector search, in memory or persisted to a directory"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector search", "embeddings", "semantic search", "similarity", "vector database"]
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
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchless-hello = "searchless.hello:main"
searchless-similarity = "searchless.similarity:main"
searchless-persist = "searchless.persist:main"
searchless-snippets = "searchless.snippets:main"
searchless-benchmark = "searchless.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["searchless"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
