[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vz89te"
version = "0.1.0"
description = "Protocol and driver logic for the MiCS-VZ-89TE indoor air quality sensor"
requires-python = ">=3.10"
dependencies = []
keywords = ["i2c", "sensor", "air-quality", "voc", "co2", "vz89te"]
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
    "Topic :: System :: Hardware :: Hardware Drivers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vz89te"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
