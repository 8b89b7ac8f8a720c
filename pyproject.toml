[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnsimple"
version = "4.0.0"
description = "Client for the DNSimple v2 API (zones, records, templates, one-click services, TLDs, registrar, webhooks) with webhook event parsing."
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "dnsimple", "api", "client", "zones", "registrar", "webhooks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dnsimple"]

[tool.hatch.build.targets.sdist]
include = ["dnsimple", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
