[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linc"
version = "0.1.0"
description = "A tiny compiler that turns a minimal language into QBE IR and builds native executables"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "qbe", "lexer", "parser", "toy-language"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linc = "linc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
