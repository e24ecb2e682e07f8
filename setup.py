from setuptools import setup, find_packages

setup(
    name="connectfour",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "gymnasium",  # Environment adapter in connectfour.interfaces.env
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connectfour=connectfour.interfaces.cli:main",
        ],
    },
)
