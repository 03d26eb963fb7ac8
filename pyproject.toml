[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumina"
version = "0.1.0"
description = "A small ray tracer with motion blur, edge antialiasing and jittered shadow rays"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "motion blur", "antialiasing", "graphics", "png"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lumina = "lumina.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lumina"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
