[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "0.1.0"
description = "Small exercises: vowel counting, base-4 arithmetic and validated plane figures"
requires-python = ">=3.10"
dependencies = []
keywords = ["vowels", "quaternary", "base-4", "geometry", "figures", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-vowels = "labworks.vowels:main"
labworks-quaternary = "labworks.quaternary_cli:main"
labworks-figures = "labworks.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.pytest.ini_options]
addopts = "-ra"
