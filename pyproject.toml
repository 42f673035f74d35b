[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgekit"
version = "0.1.0"
description = "Solutions to three online-judge exercises: balanced brackets, broken keyboard and ferry loading."
requires-python = ">=3.10"
dependencies = []
keywords = ["online-judge", "exercises", "algorithms", "stack", "queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
judgekit-brackets = "judgekit.brackets:main"
judgekit-keyboard = "judgekit.keyboard:main"
judgekit-ferry = "judgekit.ferry:main"

[tool.hatch.build.targets.wheel]
packages = ["judgekit"]

[tool.pytest.ini_options]
addopts = "-ra"
