[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyrecutils"
version = "0.1.0"
description = "Run the GNU recutils tools on rec files and in-memory record sets from Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["recutils", "recfile", "recsel", "plain-text database", "records"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pyrecutils-demo = "pyrecutils.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pyrecutils"]

[tool.pytest.ini_options]
addopts = "-ra"
