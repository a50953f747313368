[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netshell"
version = "1.0.0"
description = "A poll-based event loop, a path router for JSON requests, command-line parsing and line-editing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["poll", "event-loop", "router", "radix-tree", "middleware", "command-line", "line-editing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["netshell"]

[tool.pytest.ini_options]
addopts = "-ra"
