[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "balancebot"
version = "0.1.0"
description = "Control building blocks for a two-wheeled self-balancing robot: PID, low-pass filtering, encoder sensing and joystick command mapping."
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "pid", "control", "encoder", "balancing", "low-pass filter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["balancebot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
