[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbgui"
version = "0.1.0"
description = "A small web interface for uploading, inspecting and downloading files, with a text page for choosing an encryption mode"
requires-python = ">=3.10"
keywords = ["flask", "file-upload", "hex-view", "web-ui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask>=2.2",
    "markupsafe>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
cbgui = "cbgui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cbgui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
