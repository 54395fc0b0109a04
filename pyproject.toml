[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "langspec"
version = "0.1.0"
description = "Language specifications built from products, sums and type meta-functions, with a word cursor, an LL parser and pattern building"
requires-python = ">=3.10"
keywords = [
    "language specification",
    "algebraic data types",
    "parsing",
    "patterns",
    "code generation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["langspec"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
