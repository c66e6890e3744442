[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compilertoys"
version = "0.1.0"
description = "Small compiler-construction tools: infix to postfix and prefix, quadruples and triples, backpatching, accumulator code generation, shift-reduce parsing, LEADING/TRAILING sets and LR(0) item sets."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "parsing",
    "shift-reduce",
    "lr0",
    "operator-precedence",
    "intermediate-code",
    "backpatching",
    "postfix",
    "prefix",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Education",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compilertoys-notation = "compilertoys.notation:main"
compilertoys-intermediate = "compilertoys.intermediate:main"
compilertoys-backpatch = "compilertoys.backpatch:main"
compilertoys-machine = "compilertoys.machine:main"
compilertoys-shift-reduce = "compilertoys.shift_reduce:main"
compilertoys-leading = "compilertoys.precedence_sets:main"
compilertoys-lr0 = "compilertoys.lr0:main"

[tool.hatch.build.targets.wheel]
packages = ["compilertoys"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
