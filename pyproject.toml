[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chipdna"
version = "3.9.1081"
description = "Data model, XML parsing, message framing and event dispatch for ChipDNA payment server clients."
requires-python = ">=3.10"
dependencies = []
keywords = ["payments", "point-of-sale", "pinpad", "chipdna", "emv", "xml"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chipdna"]

[tool.pytest.ini_options]
addopts = "-ra"
