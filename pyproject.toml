[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circlepick"
version = "0.1.0"
description = "Pick three points on a grayscale canvas and draw the circle through them"
requires-python = ">=3.10"
dependencies = []
keywords = ["circle", "circumcircle", "raster", "grayscale", "geometry", "pgm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
circlepick = "circlepick.app:main"

[tool.hatch.build.targets.wheel]
packages = ["circlepick"]

[tool.pytest.ini_options]
addopts = "-ra"
