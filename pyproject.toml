[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yamwebs"
version = "0.1.0"
description = "Search several online stores for products using configurable CSS selectors"
requires-python = ">=3.10"
keywords = ["scraping", "products", "prices", "css-selectors", "search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
yamwebs = "yamwebs.app:main"

[tool.hatch.build.targets.wheel]
packages = ["yamwebs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
