from setuptools import find_packages, setup

setup(
    name="parchis-display",
    version='0.1.0',
    description="Board coordinate model, piece placement and animated display for four-player Parchís",
    author="parchis-display contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "gymnasium>=1.0.0",  # gymnasium.logger
        "numpy>=1.21.0",
        "pygame>=2.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "parchis-demo=parchis.demo:main",
        ],
    },
)
