[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmsgateway"
version = "1.0.0"
description = "Building blocks for an amateur radio RMS gateway: status tables, handshake tracking, channel check-in helpers and status views"
requires-python = ">=3.10"
dependencies = []
keywords = ["ham radio", "amateur radio", "ax25", "winlink", "gateway", "rms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rmsgateway"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
