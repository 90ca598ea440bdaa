[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small programming exercises: a quadratic solver, word tools, clock-time arithmetic and an iterated three-player prisoner's dilemma."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "exercises",
    "quadratic-equation",
    "word-count",
    "clock-arithmetic",
    "prisoners-dilemma",
    "game-theory",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-quadratic = "labkit.quadratic:main"
labkit-common-letters = "labkit.common_letters:main"
labkit-word-count = "labkit.word_count:main"
labkit-lifecycle = "labkit.lifecycle:main"
labkit-dilemma = "labkit.dilemma.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.hatch.build.targets.sdist]
include = ["labkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
