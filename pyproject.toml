[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minijava"
version = "0.1.0"
description = "Lexical and syntactic checker for MiniJava source files"
requires-python = ">=3.10"
dependencies = []
keywords = ["minijava", "compiler", "parser", "scanner", "lexer", "syntax-check"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
minijava = "minijava.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minijava"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
