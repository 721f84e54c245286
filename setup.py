# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="tock",
    version="0.1.0",
    description="A small Lisp-style language with a cooperatively paused tree-walking evaluator",
    packages=find_namespace_packages(include=["tock", "tock.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
