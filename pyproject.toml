[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lemonlab"
version = "0.1.0"
description = "A line-based TCP chat server and terminal client, with small helpers for channels, records, grids, slices and mappings"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "tcp", "asyncio", "channels", "json", "examples"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
lemonlab-server = "lemonlab.chat_server:main"
lemonlab-client = "lemonlab.chat_client:main"

[tool.hatch.build.targets.wheel]
packages = ["lemonlab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
