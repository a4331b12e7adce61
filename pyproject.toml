[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small runnable examples of design patterns and a layered product REST API with checksummed SQL migrations"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = [
    "design-patterns",
    "strategy",
    "builder",
    "adapter",
    "decorator",
    "flyweight",
    "rest-api",
    "migrations",
    "sha3",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
patternkit-api = "patternkit.api:main"
patternkit-strategy = "patternkit.strategy:main"
patternkit-builder = "patternkit.builder:main"
patternkit-adapter = "patternkit.adapter:main"
patternkit-decorator = "patternkit.decorator:main"
patternkit-flyweight = "patternkit.flyweight:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.hatch.build.targets.sdist]
include = [
    "patternkit",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"
