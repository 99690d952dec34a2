[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ungoliant"
version = "0.1.0"
description = "Corpus generation building blocks: corpus languages, sentence and document filters, language identification helpers, rotating per-language writers and web-crawl shard downloading."
requires-python = ">=3.10"
dependencies = [
    "aiohttp",
]
keywords = [
    "corpus",
    "nlp",
    "language-identification",
    "commoncrawl",
    "filtering",
    "multilingual",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
ungoliant = "ungoliant.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ungoliant"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
