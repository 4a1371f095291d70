[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sevensgame"
version = "0.1.0"
description = "Simulator for the card game Sevens, with pluggable computer player strategies"
requires-python = ">=3.10"
dependencies = []
keywords = ["sevens", "card game", "fan tan", "simulation", "strategy", "tournament"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sevensgame = "sevensgame.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sevensgame"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
