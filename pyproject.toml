[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scanslam"
version = "0.1.0"
description = "Geometry, sensor models and statistics for grid-based laser SLAM and scan matching"
requires-python = ">=3.10"
dependencies = []
keywords = ["slam", "scan matching", "robotics", "laser", "bresenham", "pose", "eigen-decomposition"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scanslam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
