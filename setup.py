# setup.py
from setuptools import setup, find_packages

setup(
    name="tzlang",
    version="0.1.0",
    description="Lexer, Pratt parser and tree-walking evaluator for the tzlang scripting language",
    packages=find_packages(include=["tzlang", "tzlang.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tzlang = tzlang.host:main"],
    },
    zip_safe=False,
)
