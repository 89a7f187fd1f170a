[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tlvtree"
version = "0.1.0"
description = "BER-TLV encoding and decoding into trees of tag-length-value nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["tlv", "ber-tlv", "emv", "asn.1", "serialization", "tree", "hexdump"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tlvtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
