[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lldkit"
version = "0.1.0"
description = "Worked examples of classic design patterns and small low-level-design case studies."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "low-level-design",
    "education",
    "object-oriented-design",
    "tic-tac-toe",
    "snake-and-ladder",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
lldkit-singleton = "lldkit.singleton:main"
lldkit-snake-ladder = "lldkit.snake_ladder:main"

[tool.hatch.build.targets.wheel]
packages = ["lldkit"]

[tool.hatch.build.targets.sdist]
include = ["lldkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
