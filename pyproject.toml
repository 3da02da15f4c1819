[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgebox"
version = "0.1.0"
description = "Solutions to classic online-judge problems as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "online-judge",
    "competitive-programming",
    "graphs",
    "dynamic-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
judgebox-config = "judgebox.config:main"

[tool.hatch.build.targets.wheel]
packages = ["judgebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
