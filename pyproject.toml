[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "synce"
version = "0.1.0"
description = "A small Synce language toolchain (lexer, parser, octal IR, hex AST dumps, multi-target code generation) with runtime utilities."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "lexer",
    "parser",
    "intermediate-representation",
    "code-generation",
    "nasm",
    "virtual-machine",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
syncec = "synce.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["synce"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
