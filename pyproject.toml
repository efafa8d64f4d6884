[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pluginregistry"
version = "0.1.0"
description = "Client for a plugin registry API: browse plugins, versions, reviews and publishers, and download signed plugin artifacts."
requires-python = ">=3.11"
keywords = ["plugins", "registry", "api-client", "ed25519", "artifacts"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = [
    "httpx>=0.25",
    "cryptography>=41",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "respx>=0.20",
]

[tool.hatch.build.targets.wheel]
packages = ["pluginregistry"]

[tool.hatch.build.targets.sdist]
include = ["pluginregistry", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
packages = ["pluginregistry"]
