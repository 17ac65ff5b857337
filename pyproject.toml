[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptolab"
version = "0.1.0"
description = "Classical ciphers and small block-cipher building blocks: Caesar, Vigenère, Playfair, a toy Feistel network, an S-box and a DES-style block cipher"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "cipher",
    "caesar",
    "vigenere",
    "playfair",
    "feistel",
    "s-box",
    "des",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptolab-caesar = "cryptolab.caesar:main"
cryptolab-playfair = "cryptolab.playfair:main"
cryptolab-vigenere = "cryptolab.vigenere:main"
cryptolab-des = "cryptolab.des:main"
cryptolab-feistel = "cryptolab.feistel:main"
cryptolab-sbox = "cryptolab.sbox:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptolab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
