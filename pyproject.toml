[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digestkit"
version = "0.1.0"
description = "Pure-Python MD2, MD4, MD5, GOST R 34.11-94, KangarooTwelve and BLAKE2 hash functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "digest", "md2", "md4", "md5", "gost94", "kangarootwelve", "blake2", "mac"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["digestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
