[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memkit"
version = "0.1.0"
description = "Composable simulated allocators and allocator-aware containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["allocator", "memory", "heap", "freelist", "containers", "simulation"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["memkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
