[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exemplar"
version = "1.0.0"
description = "Small, self-contained example programs: text tools, temperature conversion, deep equality, JSON, fractal and Lissajous images, compression and URL fetching."
requires-python = ">=3.10"
keywords = [
    "examples",
    "teaching",
    "palindrome",
    "mandelbrot",
    "lissajous",
    "bzip2",
    "deep-equality",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
exemplar-tempconv = "exemplar.tempconv:main"
exemplar-echo = "exemplar.echo:main"
exemplar-dup = "exemplar.dup:main"
exemplar-charcount = "exemplar.charcount:main"
exemplar-movie = "exemplar.movie:main"
exemplar-lissajous = "exemplar.lissajous:main"
exemplar-mandelbrot = "exemplar.mandelbrot:main"
exemplar-surface = "exemplar.surface:main"
exemplar-fetch = "exemplar.fetch:main"
exemplar-hello = "exemplar.hello:main"
exemplar-bzip = "exemplar.bzip:main"
exemplar-jpeg = "exemplar.jpeg:main"

[tool.hatch.build.targets.wheel]
packages = ["exemplar"]

[tool.hatch.build.targets.sdist]
include = ["exemplar", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
