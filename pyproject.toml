[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "friendgraph"
version = "0.1.0"
description = "A small social web app that lists a user's friends and recommends friends of friends, honouring block lists."
requires-python = ">=3.10"
keywords = ["social", "friends", "recommendation", "flask", "sqlite", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "jinja2",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
friendgraph = "friendgraph.app:main"

[tool.hatch.build.targets.wheel]
packages = ["friendgraph"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
