#!/usr/bin/env python
import re
import ast

from setuptools import setup, find_packages


requires = [
    'prompt-toolkit>=3.0,<4.0',
    'configobj>=5.0.6',
    'Pygments>=2.0',
]


with open('flexcomplete/__init__.py', 'r') as f:
    version = str(
        ast.literal_eval(
            re.search(
                r'__version__\s+=\s+(.*)',
                f.read()).group(1)))


setup(
    name='flexcomplete',
    version=version,
    description='Fuzzy abbreviation scoring and ranking for completion menus',
    long_description=open('README.rst').read(),
    packages=find_packages(exclude=['tests*']),
    include_package_data=True,
    package_data={'flexcomplete': ['flexcompleterc']},
    install_requires=requires,
    extras_require={
        'test': ['pytest', 'mock'],
    },
    entry_points={
        'console_scripts': [
            'flexcomplete = flexcomplete:main',
        ]
    },
    license="Apache License 2.0",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
