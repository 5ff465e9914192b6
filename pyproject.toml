[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volrender"
version = "0.1.0"
description = "Model code for an interactive volume renderer: CIE XYZ colours, transfer functions, running statistics and render status events."
requires-python = ">=3.10"
keywords = ["volume rendering", "transfer function", "color", "cie xyz", "statistics", "variance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["volrender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
