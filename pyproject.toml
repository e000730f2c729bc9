[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshgrapher"
version = "0.1.0"
description = "Wireframe 3D graphs of y = f(x, z) surfaces, including a melting graph and a live wave-equation simulation"
requires-python = ">=3.10"
keywords = ["graphing", "mesh", "wireframe", "wave equation", "visualization", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
meshgrapher = "meshgrapher.app:main"

[tool.hatch.build.targets.wheel]
packages = ["meshgrapher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
