[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcpack"
version = "1.1.0"
description = "Small arithmetic helpers, number-string inspection and a built-in self-check runner."
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "arithmetic", "number parsing", "formatting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
calcpack = "calcpack.suites:main"

[tool.hatch.build.targets.wheel]
packages = ["calcpack"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
