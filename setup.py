#!/usr/bin/env python3
# Start installation
from setuptools import setup, find_packages


configuration = {
    'name': 'modlogscale',
    'version': '0.1.0',
    'description': 'Log/linear hybrid scale that handles zero and negative values, with adaptive ticks',
    'license': 'MIT',
    'packages': find_packages(include=['modlogscale', 'modlogscale.*']),
    'install_requires': ['numpy', 'matplotlib>=3.4'],
    'extras_require': {'test': ['pytest']},
    'python_requires': '>=3.7',
    'include_package_data': True,
}

setup(**configuration)
