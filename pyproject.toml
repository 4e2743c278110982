[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gadgetry"
version = "0.1.0"
description = "Ebook markup linting helpers, epub zip rewriting and argument checks for git submodule and image tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["ebook", "epub", "xhtml", "lint", "text", "zip", "git", "submodule"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gadgetry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
