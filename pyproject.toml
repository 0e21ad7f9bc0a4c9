[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "tutorbook"
version = "0.1.0"
description = "A weekly lesson timetable kept in a SQLite database, with database and form-field helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["timetable", "schedule", "tutoring", "lessons", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Education",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["tutorbook"]

[tool.pytest.ini_options]
addopts = "-ra"
