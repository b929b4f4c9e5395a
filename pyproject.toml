[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "partisim"
version = "0.1.0"
description = "A small 2D particle system: emitters, force effects and an interactive scene model."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "particles",
    "particle-system",
    "simulation",
    "physics",
    "emitter",
    "gravity",
    "wind",
]
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
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["partisim"]

[tool.hatch.build.targets.sdist]
include = ["partisim", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
