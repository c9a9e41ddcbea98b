[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starterkit"
version = "0.1.0"
description = "Small console programs: countdown timer, BMI, Fibonacci, number guessing, palindromes, primes, rock-paper-scissor, calculator, temperature conversion, to-do list and word counter."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "cli", "beginner", "games", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
starterkit-timer = "starterkit.timer:main"
starterkit-bmi = "starterkit.bmi:main"
starterkit-fibonacci = "starterkit.fibonacci:main"
starterkit-guess = "starterkit.guessing:main"
starterkit-palindrome = "starterkit.palindrome:main"
starterkit-prime = "starterkit.primes:main"
starterkit-rps = "starterkit.rps:main"
starterkit-calc = "starterkit.calculator:main"
starterkit-temperature = "starterkit.temperature:main"
starterkit-todo = "starterkit.todo:main"
starterkit-wordcount = "starterkit.wordcount:main"

[tool.hatch.build.targets.wheel]
packages = ["starterkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
