[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flapsim"
version = "0.1.0"
description = "A small side-scrolling flappy-bird game and a bouncing-ball physics sandbox built on pygame"
requires-python = ">=3.10"
keywords = ["game", "flappy-bird", "arcade", "pygame", "physics", "sandbox"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
flapsim = "flapsim.flappy_bird:main"

[tool.hatch.build.targets.wheel]
packages = ["flapsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
