[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trendkit"
version = "0.1.0"
description = "Building blocks for technical analysis: candles, trading signals, step-by-step methods and moving average interfaces."
requires-python = ">=3.10"
dependencies = []
keywords = ["technical-analysis", "trading", "ohlcv", "candlestick", "signals", "timeseries"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["trendkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
