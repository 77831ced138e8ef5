[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacetrash"
version = "0.1.0"
description = "A small side-scrolling space-trash shooter engine with a text-mode screen"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "shooter", "side-scroller", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spacetrash = "spacetrash.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spacetrash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
