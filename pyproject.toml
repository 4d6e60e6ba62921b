[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankgrid"
version = "0.1.0"
description = "A small grid tank game: steer your tank, dodge enemy fire and shoot enemies for points."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "grid", "tank", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tankgrid = "tankgrid.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["tankgrid"]

[tool.pytest.ini_options]
addopts = "-ra"
