[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "innoparse"
version = "1.9.0"
description = "Checksums, the ARC4 cipher and output file names for Inno Setup installer data"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "inno setup",
    "installer",
    "checksum",
    "crc32",
    "adler32",
    "md5",
    "sha1",
    "arc4",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Packaging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["innoparse"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
