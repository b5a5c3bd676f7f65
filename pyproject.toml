[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "standup-attendance"
version = "0.1.0"
description = "Backend service for tracking daily standup attendance"
requires-python = ">=3.10"
keywords = ["attendance", "standup", "team", "reporting", "flask", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "flask",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
standup-attendance = "standup_attendance.app:main"

[tool.hatch.build.targets.wheel]
packages = ["standup_attendance"]

[tool.pytest.ini_options]
addopts = "-ra"
