[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadui"
version = "0.1.0"
description = "Immediate-mode UI building blocks: layout cursor, input state, text editing, draw commands, mesh batching and styles"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "immediate-mode", "gui", "text-editor", "layout", "mesh"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
