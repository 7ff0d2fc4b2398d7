[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitalk"
version = "1.0.0"
description = "Send text between processes one bit at a time over SIGUSR1 and SIGUSR2"
requires-python = ">=3.10"
dependencies = []
keywords = ["signals", "ipc", "sigusr1", "sigusr2", "messaging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minitalk-server = "minitalk.server:main"
minitalk-client = "minitalk.client:main"
minitalk-server-bonus = "minitalk.server:bonus_main"
minitalk-client-bonus = "minitalk.client:bonus_main"

[tool.hatch.build.targets.wheel]
packages = ["minitalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
