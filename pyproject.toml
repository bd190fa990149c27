[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "tinyshell"
version = "1.0.0"
description = "Building blocks for a small command shell: file, process, environment and calculation commands, plus demo programs"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["shell", "command-line", "processes", "environment", "expressions"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tinyshell-counter = "tinyshell.programs.counter:main"
tinyshell-duck = "tinyshell.programs.duck:main"
tinyshell-tictactoe = "tinyshell.programs.tictactoe:main"
tinyshell-producer-consumer = "tinyshell.programs.producer_consumer:main"
tinyshell-child = "tinyshell.programs.child:main"

[tool.setuptools.packages.find]
include = ["tinyshell", "tinyshell.*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
