[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sinusplot"
version = "0.1.0"
description = "A small stack-based evaluator for arithmetic expressions with sin, cos, tg, sqrt and ln"
requires-python = ">=3.10"
dependencies = []
keywords = ["expression", "evaluator", "shunting-yard", "calculator", "math"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["sinusplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
