[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exercisekit"
version = "5.3.0"
description = "Helpers for a course of small programming exercises: terminal messages, a language-server project file and worked lesson solutions."
requires-python = ">=3.11"
dependencies = [
    "rich",
]
keywords = ["exercises", "learning", "education", "course", "lessons"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["exercisekit"]

[tool.hatch.build.targets.sdist]
include = [
    "exercisekit",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
