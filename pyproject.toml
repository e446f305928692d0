[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "copydash"
version = "0.1.0"
description = "A small side-scrolling arcade game: jump over spikes, land on blocks, reach the portal."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "platformer", "arcade", "side-scroller", "pygame"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
copydash = "copydash.app:main"

[tool.hatch.build.targets.wheel]
packages = ["copydash"]

[tool.pytest.ini_options]
addopts = "-ra"
