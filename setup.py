from setuptools import setup, find_packages

setup(
    name="sixfour",
    version="0.1.0",
    description="Four-in-a-row on a 6x6 grid: game engine and computer opponent",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sixfour=sixfour.interfaces.cli:main",
        ],
    },
)
