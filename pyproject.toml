[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopcore"
version = "1.0.0"
description = "Product catalog, inventory, orders and sales analytics for a small point-of-sale system"
requires-python = ">=3.10"
dependencies = []
keywords = ["shopping", "inventory", "point-of-sale", "orders", "retail"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shopcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
