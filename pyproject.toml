[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hazel"
version = "0.1.0"
description = "A small game-engine application framework: event system, logging and a windowed run loop"
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["game engine", "events", "window", "application framework", "pyglet"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hazel-sandbox = "hazel.application:main"

[tool.hatch.build.targets.wheel]
packages = ["hazel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
