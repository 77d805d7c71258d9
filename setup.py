#!/usr/bin/env python
import os

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))

about = {}
with open(os.path.join(here, "src", "cel_tools", "version.py")) as f:
    exec(f.read(), about)

setup(
    name="cel-tools",
    version=about["__version__"],
    description="Python package for reading CEL and CL2 sprite files",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "attrs>=23.1.0",
        "numpy",
        "Pillow>=10.3.0",
        "typing-extensions; python_version<'3.11'",
    ],
    extras_require={
        "dev": ["pytest", "ipython"],
        "test": ["pytest"],
    },
    entry_points={"console_scripts": ["cel-tools=cel_tools.__main__:main"]},
)
