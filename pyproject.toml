[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceedit"
version = "0.1.0"
description = "An early-stage modal terminal text editor with tabs and a ':' command prompt."
requires-python = ">=3.10"
dependencies = ["blessed"]
keywords = ["editor", "terminal", "text-editor", "tui", "modal"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spaceedit = "spaceedit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
