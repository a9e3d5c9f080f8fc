[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketgb"
version = "0.1.0"
description = "Game Boy emulation building blocks: sound unit, cartridge banking, savegames and configuration"
requires-python = ">=3.11"
dependencies = [
    "tomli-w",
]
keywords = ["gameboy", "emulator", "apu", "cartridge", "mbc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pocketgb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
