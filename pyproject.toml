[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashchat"
version = "0.1.0"
description = "Chat user registry keeping logins and SHA-1 password digests in an open-addressing hash table"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "hash table", "sha1", "quadratic probing", "authentication"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hashchat = "hashchat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hashchat"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
