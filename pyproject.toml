[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procshell"
version = "0.1.0"
description = "A small Unix shell with background jobs, a four-stage pipeline runner and a /proc report tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "proc", "pipeline", "background jobs", "linux"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
fetch-info = "procshell.fetch_info:main"
pipe4 = "procshell.pipeline:main"
ssi = "procshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["procshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
