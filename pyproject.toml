[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsa-steps"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises: patterns, maths, recursion, hashing, binary search and array problems."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "recursion",
    "arrays",
    "binary-search",
    "interview-practice",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
dsa-patterns = "dsa_steps.patterns:main"

[tool.hatch.build.targets.wheel]
packages = ["dsa_steps"]

[tool.pytest.ini_options]
addopts = "-ra"
