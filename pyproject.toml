[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cerberus-tui"
version = "0.1.0"
description = "A keyboard- and mouse-driven full-screen terminal menu with a home page and a settings page"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "tui", "menu", "console", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cerberus = "cerberus_tui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cerberus_tui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
