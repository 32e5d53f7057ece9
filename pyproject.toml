[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doppel"
version = "0.1.0"
description = "Find duplicate files across directories using size grouping and BLAKE3 hashing"
requires-python = ">=3.10"
dependencies = []
keywords = ["duplicates", "files", "blake3", "dedupe", "filesystem"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
doppel = "doppel.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["doppel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
