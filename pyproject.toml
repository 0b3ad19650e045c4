[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agontools"
version = "1.0.0"
description = "Small command-line utilities: sort, tail, uniq, wc, touch, updatedb/locate and screen colour and mode helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sort",
    "tail",
    "uniq",
    "wc",
    "touch",
    "locate",
    "updatedb",
    "vdu",
    "command-line",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
agon-sort = "agontools.sort:main"
agon-tail = "agontools.tail:main"
agon-uniq = "agontools.uniq:main"
agon-wc = "agontools.wc:main"
agon-touch = "agontools.touch:main"
agon-updatedb = "agontools.updatedb:main"
agon-locate = "agontools.locate:main"
agon-setcolor = "agontools.setcolor:main"
agon-setmode = "agontools.setmode:main"

[tool.hatch.build.targets.wheel]
packages = ["agontools"]

[tool.pytest.ini_options]
addopts = "-ra"
