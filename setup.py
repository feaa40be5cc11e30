#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='sloth-lazy',
    version='0.2.0',
    description='Lazily evaluated values that are computed at most once',
    long_description=read("README.rst"),
    author='The sloth developers',
    packages=['sloth'],
    keywords="lazy evaluation thunk",
    install_requires=["attrs>=19.2.0"],
    extras_require={
        "test": ["pytest", "PyHamcrest>=2.0"],
    },
    python_requires='>=3.5',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
