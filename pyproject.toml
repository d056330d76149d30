[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nemshell"
version = "0.1.0"
description = "Building blocks of a small interactive shell: environment, builtins, cd, redirections and here-documents"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "builtins", "heredoc", "redirection", "environment", "cd"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nemshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
