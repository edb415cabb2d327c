[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexagon_game"
version = "0.1.0"
description = "A hexagonal-grid capture board game for two players or one player against the computer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "board-game", "hexagon", "strategy", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hexagon = "hexagon_game.main:main"

[tool.hatch.build.targets.wheel]
packages = ["hexagon_game"]

[tool.pytest.ini_options]
addopts = "-ra"
