[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "dockmodel"
version = "0.1.0"
description = "Configuration model for a desktop dock: panels, launchers, appearance and the application menu built from .desktop files"
requires-python = ">=3.10"
dependencies = []
keywords = ["dock", "panel", "desktop", "launcher", "freedesktop", "desktop-entry", "xdg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["dockmodel*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
