[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "homestead"
version = "0.1.0"
description = "Domain model and services for setting up a Zsh workstation: packages, scripts, shell configurations, plugins, a setup wizard and a git-backed dotfiles repository."
requires-python = ">=3.10"
dependencies = []
keywords = ["zsh", "oh-my-zsh", "dotfiles", "setup", "workstation", "plugins"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Installation/Setup",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["homestead"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
