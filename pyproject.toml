[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "harbol"
version = "1.0.0"
description = "General-purpose building blocks: a mutable string, an n-ary tree, C-aligned byte tuples, tagged variants, hashing helpers, integer logarithms and a Mersenne Twister."
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "string", "tree", "tuple", "alignment", "variant", "hashing", "mersenne-twister"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["harbol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
