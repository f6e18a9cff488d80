[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weathercep"
version = "0.1.0"
description = "HTTP service that reports the current temperature for a Brazilian postal code (CEP)"
requires-python = ">=3.10"
keywords = ["cep", "weather", "temperature", "viacep", "weatherapi", "flask"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
weathercep = "weathercep.app:main"

[tool.hatch.build.targets.wheel]
packages = ["weathercep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
