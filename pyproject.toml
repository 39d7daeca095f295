[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evolve"
version = "0.11.2.dev0"
description = "Evolve the movement of critters through food distribution"
requires-python = ">=3.10"
dependencies = []
keywords = ["evolution", "simulation", "artificial life", "genetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
evolve = "evolve.looper:main"

[tool.hatch.build.targets.wheel]
packages = ["evolve"]

[tool.hatch.build.targets.sdist]
include = ["evolve", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
