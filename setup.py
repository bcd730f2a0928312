# setup.py
from setuptools import setup, find_packages

setup(
    name="sevenlang",
    version="0.1.0",
    description="A small Scheme-like expression language: lexer, parser and evaluator",
    packages=find_packages(include=["sevenlang", "sevenlang.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sevenlang=sevenlang.__main__:main"],
    },
    zip_safe=False,
)
