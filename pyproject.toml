[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cc1pitools"
version = "0.1.0"
description = "Analysis helpers for neutrino CC1Pi studies: resonance tables, tree branch layouts, heavy neutral lepton decay widths and kinematics, and multi-panel layout geometry"
requires-python = ">=3.10"
dependencies = [
    "scipy",
]
keywords = ["neutrino", "physics", "heavy neutral lepton", "resonance", "analysis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cc1pitools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
