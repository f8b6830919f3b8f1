[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "concurrency-lessons"
version = "0.1.0"
description = "Small runnable demonstrations of classic concurrency patterns with threads, locks and queues: wait groups, mutexes, channels, producer-consumer, dining philosophers and the sleeping barber."
requires-python = ">=3.10"
keywords = [
    "concurrency",
    "threading",
    "mutex",
    "queue",
    "dining-philosophers",
    "sleeping-barber",
    "producer-consumer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dining-philosophers = "concurrency_lessons.dining:main"
waitgroup-demo = "concurrency_lessons.waitgroup_demo:main"
messages-demo = "concurrency_lessons.messages:main"
income-demo = "concurrency_lessons.income:main"
pizzeria = "concurrency_lessons.pizzeria:main"
buffered-channel-demo = "concurrency_lessons.buffered:main"
select-demo = "concurrency_lessons.select_demo:main"
shout = "concurrency_lessons.shout:main"
sleeping-barber = "concurrency_lessons.barbershop:main"

[tool.hatch.build.targets.wheel]
packages = ["concurrency_lessons"]

[tool.pytest.ini_options]
addopts = "-ra"
