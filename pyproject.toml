[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kkeditkit"
version = "0.1.0"
description = "Syntax highlighting rule sets and helper tools for a programmer's text editor"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "syntax-highlighting",
    "text-editor",
    "regex",
    "xml",
    "progress",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kkeditkit-tagreader = "kkeditkit.tagreader:main"

[tool.hatch.build.targets.wheel]
packages = ["kkeditkit"]

[tool.pytest.ini_options]
addopts = "-ra"
