[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gestion_etudiants"
version = "1.0.0"
description = "Interactive console manager for students, classes, subjects, grades and subject-class links stored in CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "grades", "school", "csv", "console", "crud"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: French",
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
gestion-etudiants = "gestion_etudiants.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gestion_etudiants"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
