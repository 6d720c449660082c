[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wifisim"
version = "0.1.0"
description = "Discrete-time simulations of WiFi 4 (CSMA/CA), WiFi 5 (MU-MIMO) and WiFi 6 (OFDMA) channel access"
requires-python = ">=3.10"
dependencies = []
keywords = ["wifi", "simulation", "csma-ca", "mu-mimo", "ofdma", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wifisim = "wifisim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wifisim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
