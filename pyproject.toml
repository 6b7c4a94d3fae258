[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "padbridge"
version = "0.1.0"
description = "Translate third-party gamepad HID reports into Switch Pro Controller input state and motion data"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamepad", "controller", "hid", "bluetooth", "motion", "spi-flash"]
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
    "Topic :: Games/Entertainment",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["padbridge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
