[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigconv"
version = "1.0.0"
description = "Convert binary signals to the 4B3T and FOMOT ternary line codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["line code", "4B3T", "FOMOT", "ternary", "signal", "telecommunications"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sigconv = "sigconv.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sigconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
