[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ohmimetro"
version = "0.1.0"
description = "Ohmmeter logic: voltage-divider resistance from ADC counts, E24 colour codes, an SSD1306 framebuffer and WS2812 band pixels"
requires-python = ">=3.10"
dependencies = []
keywords = ["ohmmeter", "resistor", "color-code", "e24", "ssd1306", "ws2812", "adc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ohmimetro = "ohmimetro.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ohmimetro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
