[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kwimy"
version = "0.0.1"
description = "Keyboard-driven terminal screens for a guided system installer"
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["installer", "tui", "terminal", "setup", "wizard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Installation/Setup",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["kwimy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
