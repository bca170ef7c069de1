[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "techan"
version = "0.1.0"
description = "Technical analysis toolkit: candles, time series, indicators, trading rules, strategies and performance analysis"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "technical-analysis",
    "trading",
    "indicators",
    "backtesting",
    "finance",
    "candlestick",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["techan"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
