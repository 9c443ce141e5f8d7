[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "infixcalc"
version = "0.1.0"
description = "Convert integer infix expressions to postfix and evaluate them"
requires-python = ">=3.10"
dependencies = []
keywords = ["infix", "postfix", "shunting-yard", "calculator", "expression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
infixcalc = "infixcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["infixcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
