from setuptools import setup, find_packages
import os
import re

# Import version from KVParse/__init__.py
with open(os.path.join('KVParse', '__init__.py'), 'r') as f:
    version = re.search(r"__version__\s*=\s*'(.*)'", f.read()).group(1)

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="KVParse",
    version=version,
    description="A parser and typed accessor for line-oriented keyword/value configuration files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click>=8.0.0",
        "PyYAML>=5.4",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kvparse=KVParse.__main__:main",
        ],
    },
)
