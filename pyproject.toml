[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duinokit"
version = "0.1.0"
description = "Software clock, calendar helpers, date strings and an HD44780-over-I2C LCD driver for microcontroller-style projects"
requires-python = ">=3.10"
dependencies = []
keywords = ["clock", "calendar", "epoch", "lcd", "hd44780", "i2c", "pcf8574"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["duinokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
