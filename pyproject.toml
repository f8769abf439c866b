[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "espurna"
version = "0.1.0"
description = "Home automation device configuration helpers: build timestamps, feature flags, magnitudes, RTC memory layout, settings checks and a stream ring buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["home-automation", "iot", "firmware", "configuration", "mqtt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["espurna"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
