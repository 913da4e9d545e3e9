[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "profanityout"
version = "0.1.0"
description = "Detect and censor profanity in text, with leet speak, accent, spacing and HTML sanitization"
requires-python = ">=3.10"
dependencies = []
keywords = ["profanity", "filter", "censor", "moderation", "leetspeak"]
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
    "Topic :: Text Processing :: Filters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["profanityout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
