[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deepfry"
version = "0.1.0"
description = "Deepfry images by applying per-channel bit operations to every pixel."
requires-python = ">=3.11"
keywords = ["image", "deepfry", "pixels", "bit operations", "effects"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
deepfry = "deepfry.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["deepfry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
