[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crushfx"
version = "1.0.1"
description = "Building blocks of a bit crushing audio effect: LFO-swept resolution, mix levels, parameters and state persistence"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "bitcrusher", "lfo", "effect", "limiter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crushfx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
