[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heartengine"
version = "0.1.0"
description = "Game logic for a dating-sim classroom adventure: branching NPC dialogs and quizzes, AABB collision and debug line geometry"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game", "dialog", "visual-novel", "quiz", "aabb", "collision", "skeleton"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Natural Language :: Chinese (Traditional)",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["heartengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 120
target-version = "py310"

[tool.mypy]
python_version = "3.10"
