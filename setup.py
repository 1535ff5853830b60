#!/usr/bin/env python
from setuptools import (
    find_packages,
    setup,
)

extras_require = {
    "benchmark": [
        "termcolor>=1.1.0",
    ],
    "dev": [
        "build>=0.9.0",
        "bumpversion>=0.5.3",
        "ipython",
        "pre-commit>=3.4.0",
        "tox>=4.0.0",
        "twine",
        "wheel",
    ],
    "isqrt": [
        "cached-property>=1.5.1",
        "eth-utils>=2.0.0",
    ],
    "test": [
        "termcolor>=1.1.0",
        "hypothesis>=5,<7",
        "pytest>=7.0.0",
        "pytest-cov>=4.0.0",
        "pytest-timeout>=2.0.0",
        "pytest-xdist>=3.0",
    ],
}


extras_require["dev"] = (
    extras_require["dev"]
    + extras_require["benchmark"]
    + extras_require["isqrt"]
    + extras_require["test"]
)

install_requires = extras_require["isqrt"]

with open("README.md") as readme_file:
    long_description = readme_file.read()

setup(
    name="integer-sqrt",
    # *IMPORTANT*: Don't manually change the version here. Use the 'bumpversion' utility.
    version="0.1.0",
    description="Exact integer square roots for fixed-width integer types",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="integer-sqrt contributors",
    url="https://github.com/integer-sqrt/integer-sqrt",
    include_package_data=True,
    install_requires=install_requires,
    python_requires=">=3.8, <4",
    extras_require=extras_require,
    license="MIT",
    zip_safe=False,
    keywords="integer square root isqrt fixed-width",
    packages=find_packages(exclude=["tests", "tests.*", "scripts", "scripts.*"]),
    package_data={"integer_sqrt": ["py.typed"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
