[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monoui"
version = "0.1.0"
description = "Minimal form-based user interface and monochrome drawing primitives for small displays"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "menu", "monochrome", "display", "graphics", "forms", "bitmap"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["monoui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
