[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidecli"
version = "0.1.0"
description = "Interactive command-line editor for slide documents made of rectangles, ellipses and groups"
requires-python = ">=3.10"
dependencies = []
keywords = ["slides", "presentation", "cli", "editor", "shapes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Presentation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slidecli = "slidecli.application:main"

[tool.hatch.build.targets.wheel]
packages = ["slidecli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
