[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pvzgame"
version = "0.1.0"
description = "A small lane-defence game: plant peashooters and sunflowers, collect sunshine, stop the zombies."
requires-python = ">=3.10"
keywords = ["game", "pygame", "tower-defense", "lane-defense", "zombies"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pvzgame = "pvzgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pvzgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
