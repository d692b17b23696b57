[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pushtalk"
version = "0.1.0"
description = "Signal-based text messaging between processes, a two-stack integer sorter, and small character and string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["signals", "ipc", "sorting", "push_swap", "stacks", "strings"]
classifiers = [
    "Topic :: Utilities",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: POSIX",
    "Environment :: Console",
    "Intended Audience :: Developers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pushtalk-client = "pushtalk.minitalk.client:main"
pushtalk-server = "pushtalk.minitalk.server:main"
push-swap = "pushtalk.push_swap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pushtalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
