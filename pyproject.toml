[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tomasulo"
version = "0.1.0"
description = "A cycle-by-cycle simulator of Tomasulo's dynamic scheduling algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tomasulo",
    "simulator",
    "computer-architecture",
    "out-of-order",
    "reservation-station",
    "register-renaming",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tomasulo = "tomasulo.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["tomasulo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
