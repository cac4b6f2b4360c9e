from setuptools import setup, find_packages

setup(
    name="drift-arcade",
    version="0.1.0",
    description="2D top-down drift game with arcade physics, pygame renderer and gymnasium environment",
    packages=find_packages(include=["drift", "drift.*"]),
    py_modules=["play_human", "analyze_telemetry"],
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
        "pygame>=2.1",
        "gymnasium>=0.29",
        "matplotlib>=3.7",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "drift-play=play_human:main",
            "drift-analyze=analyze_telemetry:main",
        ],
    },
    zip_safe=False,
)
