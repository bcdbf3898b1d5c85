[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "praticas"
version = "0.1.0"
description = "Small console games and a toy bank account model: hangman, a number guessing game and accounts."
requires-python = ">=3.10"
dependencies = []
keywords = ["hangman", "forca", "guessing-game", "adivinhacao", "console", "games", "bank"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
praticas-forca = "praticas.forca:main"
praticas-adivinhacao = "praticas.adivinhacao:main"
praticas-banco = "praticas.banco:main"

[tool.hatch.build.targets.wheel]
packages = ["praticas"]

[tool.hatch.build.targets.sdist]
include = ["praticas", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
files = ["praticas"]
