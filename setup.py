# setup.py
from setuptools import setup, find_packages

setup(
    name="wfobj",
    version="1.0.0",
    description="Streaming Wavefront OBJ lexer and parser",
    packages=find_packages(include=["wfobj", "wfobj.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
