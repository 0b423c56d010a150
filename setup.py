#!/usr/bin/env python
from setuptools import setup, find_packages

with open("README.md") as readme_file:
    readme = readme_file.read()

requirements = ["dynaconf>=3.1.0", "logzero"]

test_requirements = ['pytest']

setup_requirements = ['setuptools', 'wheel']

extras = {
    'test': test_requirements,
    'setup': setup_requirements,
}

setup(
    name="stageup",
    version="0.1.0",
    description="Config entry upgraders for data-pipeline stage configurations.",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=requirements,
    tests_require=test_requirements,
    extras_require=extras,
    setup_requires=setup_requirements,
    license="Apache License 2.0",
    zip_safe=False,
    keywords="stageup",
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
