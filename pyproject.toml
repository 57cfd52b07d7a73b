[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceshooter"
version = "0.1.0"
description = "A small vertical space shooter: dodge and shoot falling asteroids."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "asteroids", "pygame", "sprites", "collision"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spaceshooter = "spaceshooter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
