[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "varnavinyas"
version = "0.1.0"
description = "Nepali orthography toolkit: sandhi rules, sandhi splitting, word-origin classification and morphological analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["nepali", "devanagari", "sandhi", "morphology", "orthography", "linguistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Natural Language :: Nepali",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["varnavinyas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
