[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "managedesk"
version = "0.1.0"
description = "Small interactive record-keeping desks for a bank, a car showroom, a library and a university"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bank",
    "showroom",
    "library",
    "university",
    "records",
    "console",
    "menu",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
managedesk-bank = "managedesk.bank:main"
managedesk-showroom = "managedesk.showroom:main"
managedesk-library = "managedesk.library:main"
managedesk-university = "managedesk.university:main"

[tool.hatch.build.targets.wheel]
packages = ["managedesk"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
