[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "discoscene"
version = "0.1.0"
description = "A small OpenGL scene of textured meshes lit by three rotating coloured spotlights"
requires-python = ">=3.10"
keywords = ["opengl", "rendering", "spotlight", "wavefront", "obj", "ppm", "scene"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
discoscene = "discoscene.app:main"

[tool.hatch.build.targets.wheel]
packages = ["discoscene"]

[tool.pytest.ini_options]
addopts = "-ra"
