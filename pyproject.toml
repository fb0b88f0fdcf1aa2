[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tensordrill"
version = "0.1.0"
description = "Guided tensor exercises with timing metrics and backend reporting"
requires-python = ">=3.10"
keywords = ["tensors", "numpy", "exercises", "education", "linear-algebra", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tensordrill = "tensordrill.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tensordrill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
