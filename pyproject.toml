[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basicds"
version = "0.1.0"
description = "Classic queues, stacks, deques, sorting and searching algorithms with small interactive command-line programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "queue",
    "stack",
    "deque",
    "sorting",
    "searching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
basicds-array-queue = "basicds.array_queue:main"
basicds-linked-queue = "basicds.linked_queue:main"
basicds-deque = "basicds.deque:main"
basicds-stack-queue = "basicds.stack_queue:main"
basicds-stack = "basicds.stacks:main"
basicds-sort = "basicds.sorting:main"
basicds-search = "basicds.searching:main"

[tool.hatch.build.targets.wheel]
packages = ["basicds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
