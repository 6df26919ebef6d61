[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskbench"
version = "0.1.0"
description = "A text-file menu, a chunked run-length encoder with a benchmark, and a Snake arcade game"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["snake", "game", "run-length encoding", "compression", "file handling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskbench-files = "taskbench.filemenu:main"
taskbench-rle = "taskbench.rle:main"
taskbench-snake = "taskbench.app:main"

[tool.hatch.build.targets.wheel]
packages = ["taskbench"]

[tool.pytest.ini_options]
addopts = "-ra"
