[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vimeocrawl"
version = "0.1.0"
description = "Find the HLS stream behind a Vimeo player page, save it as MP4 with ffmpeg and track batch results"
requires-python = ">=3.10"
dependencies = []
keywords = ["vimeo", "m3u8", "hls", "ffmpeg", "mp4", "video"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: MacOS",
    "Operating System :: Microsoft :: Windows",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vimeocrawl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
