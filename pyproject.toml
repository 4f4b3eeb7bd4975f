[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algopad"
version = "0.1.0"
description = "Worked algorithm solutions, small data structures, a GCD calculator and CSV helpers"
requires-python = ">=3.10"
keywords = ["algorithms", "data-structures", "interview", "gcd", "csv", "education"]
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
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
algopad-gcd = "algopad.gcd:main"
algopad-gcd-server = "algopad.web:main"
algopad-combine-csv = "algopad.csv_tools:main_combine"
algopad-comma-list = "algopad.csv_tools:main_comma_list"

[tool.hatch.build.targets.wheel]
packages = ["algopad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
