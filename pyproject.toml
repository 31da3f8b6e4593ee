[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smallutils"
version = "0.1.0"
description = "Series-based math functions and small cat and grep command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "taylor-series", "cat", "grep", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Text Processing :: Filters",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smallutils-cat = "smallutils.cat:main"
smallutils-grep = "smallutils.grep:main"

[tool.hatch.build.targets.wheel]
packages = ["smallutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
