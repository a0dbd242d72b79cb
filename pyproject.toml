[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcf8316"
version = "0.1.0"
description = "I2C driver and register models for the MCF8316C-Q1 sensorless FOC BLDC motor driver"
requires-python = ">=3.10"
dependencies = []
keywords = ["mcf8316c", "bldc", "motor-driver", "i2c", "crc8", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mcf8316"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
