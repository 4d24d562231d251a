[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fortresstanks"
version = "0.1.0"
description = "A small turn-based artillery tank game drawn with vector line meshes"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "artillery", "tanks", "turn-based", "pygame", "line-mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fortresstanks = "fortresstanks.game:main"

[tool.hatch.build.targets.wheel]
packages = ["fortresstanks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
