[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "nomcool"
version = "1.0.0"
description = "A terminal multiplication quiz with experience levels, gold, a skin shop and a mascot"
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "multiplication", "times tables", "education", "game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nomcool = "nomcool.app:main"

[tool.setuptools.packages.find]
include = ["nomcool*"]

[tool.pytest.ini_options]
addopts = "-ra"
