[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casestudygen"
version = "0.1.0"
description = "Interactive console tool that assigns random case-study parameters to teams."
requires-python = ">=3.10"
dependencies = []
keywords = ["case study", "teaching", "random assignment", "teams", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
casestudygen = "casestudygen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["casestudygen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
