[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplecollision"
version = "1.0.0"
description = "A small 2D simulation of collisions between equal-mass balls in a box, with a Tkinter window"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "collision", "simulation", "elastic", "2d", "tkinter"]
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
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simplecollision = "simplecollision.app:main"

[tool.hatch.build.targets.wheel]
packages = ["simplecollision"]

[tool.pytest.ini_options]
addopts = "-ra"
