[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "railbook"
version = "0.1.0"
description = "A terminal railway reservation system with trains, seat schedules, bookings and waiting lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["railway", "reservation", "booking", "tickets", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
railbook = "railbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["railbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
