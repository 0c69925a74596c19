[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of classic design patterns and SOLID principles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "solid",
    "builder",
    "adapter",
    "decorator",
    "factory",
    "examples",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit = "patternkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
