[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyroute"
version = "0.1.0"
description = "A small threaded HTTP server with a trie-based router and mountable sub-routers"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "router", "routing", "sockets"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyroute = "tinyroute.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
