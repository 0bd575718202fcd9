[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nulstr"
version = "1.0.0"
description = "Operations on null-terminated byte strings held in bytes-like buffers"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "bytes", "null-terminated", "strlen", "strcmp", "strspn"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["nulstr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
