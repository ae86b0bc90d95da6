#! /usr/bin/env python
'''
reprand setup script
'''

# isort:skip_file

from setuptools import setup, find_packages


setup(
    name="reprand",
    version="1.0.0",
    description="Reproducible, seedable pseudo-random numbers based on MT19937",
    packages=find_packages(include=["reprand", "reprand.*"]),
    package_data={"reprand": ["tests/pytest.ini"]},
    python_requires=">=3.8",
    install_requires=["numpy>=1.17"],
    extras_require={
        "test": ["pytest>=7", "scipy"],
    },
    classifiers=[
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering",
    ],
)
