[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbiter"
version = "0.1.0"
description = "Core types for routing cross-chain transfers: orbits, actions, payloads, packets and routers."
requires-python = ">=3.10"
dependencies = []
keywords = ["cross-chain", "routing", "payload", "orbit", "bridge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["orbiter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
