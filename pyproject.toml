[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orderbox"
version = "0.1.0"
description = "A small container that can be traversed in several orders: ascending, descending, side-cross, reverse, insertion and middle-out."
requires-python = ">=3.10"
dependencies = []
keywords = ["container", "iterator", "cursor", "traversal", "ordering", "middle-out"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orderbox-demo = "orderbox.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["orderbox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
