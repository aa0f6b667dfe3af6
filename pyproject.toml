[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabtools"
version = "0.1.0"
description = "Multi-threaded image contrast adjustment and an interactive git fetch helper"
requires-python = ">=3.10"
keywords = ["image", "contrast", "threads", "git", "fetch"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Utilities",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
image-contrast = "oslabtools.contrast_cli:main"
git-fetcher = "oslabtools.gitfetch:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
