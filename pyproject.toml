[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamesapi"
version = "0.1.0"
description = "A small RESTful JSON API for a catalogue of games, served as a WSGI application."
requires-python = ">=3.10"
keywords = ["rest", "api", "wsgi", "json", "games", "werkzeug"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "werkzeug>=2.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
gamesapi = "gamesapi.main:main"

[tool.hatch.build.targets.wheel]
packages = ["gamesapi"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
