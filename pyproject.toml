[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "artlens"
version = "0.1.0"
description = "Artistic photo filters, a small in-memory photo library and side-by-side collages from the terminal"
requires-python = ">=3.10"
keywords = [
    "image",
    "photo",
    "filter",
    "cartoon",
    "pencil sketch",
    "oil painting",
    "collage",
    "raster",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "numpy",
    "scipy",
    "pillow",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
artlens = "artlens.app:main"
artlens-menu = "artlens.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["artlens"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
