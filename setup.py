# setup.py
from setuptools import setup, find_packages

setup(
    name="lisplet",
    version="0.1.0",
    description="A small Lisp-like expression interpreter",
    packages=find_packages(include=["lisplet", "lisplet.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lisplet=lisplet.__main__:main"],
    },
    zip_safe=False,
)
