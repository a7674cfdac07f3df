[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asteroidgame"
version = "0.1.0"
description = "A small asteroid-style arcade game with a configurable window size and game speed multiplier."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "asteroids", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
asteroidgame = "asteroidgame.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["asteroidgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
