[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitprop"
version = "0.1.0"
description = "SGP4/SDP4 satellite propagation from two-line element sets, with coordinate and look-angle conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["sgp4", "sdp4", "tle", "satellite", "orbit", "propagation", "astronomy", "look angles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
visible-sats = "orbitprop.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["orbitprop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
