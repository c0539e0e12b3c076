[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "domainprims"
version = "0.1.0"
description = "Validated domain primitives, use-case errors, settings checks and dataclass builders"
requires-python = ">=3.10"
dependencies = []
keywords = ["domain-driven-design", "value-object", "validation", "builder", "primitives"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["domainprims"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
