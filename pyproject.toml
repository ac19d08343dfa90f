[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cshell"
version = "0.1.0"
description = "An interactive Unix shell with built-in navigation, search, history and job control commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "job control", "command line", "history", "aliases"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cshell = "cshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["cshell"]

[tool.pytest.ini_options]
addopts = "-ra"
