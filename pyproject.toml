[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "assext"
version = "0.1.1"
description = "Asset file extension tool: stamps sequential numbers into a chosen region of a Spine texture and copies its companion files"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["spine", "asset", "image", "texture", "game-development"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
assext = "assext.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["assext"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
