[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hostlink"
version = "0.1.0"
description = "Embedded-style building blocks: STL-like containers, LED, button and joystick models"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "containers", "linked-list", "button", "debounce", "joystick", "led"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hostlink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
