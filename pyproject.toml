[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zeroize"
version = "0.1.0"
description = "Overwrite writable buffers with a fixed pattern and verify that they were wiped"
requires-python = ">=3.10"
dependencies = []
keywords = ["zeroize", "memory", "wipe", "security", "buffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zeroize-demo = "zeroize.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zeroize"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
