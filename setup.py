#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'docopt', 'delnone', 'tqdm']
test_requires = ['tox', 'pytest', 'tabulate']

setup(
    name='xducers',
    version='0.1.0',
    packages=['xducers'],
    install_requires = requires,
    extras_require = {
      'test': test_requires,
    },
    entry_points = {
      'console_scripts': [
        'xducers = xducers.ui:ui_main',
        ],
    },
    license='MIT',
    description='composable transducers: chain, branch and multiplex reducing processes.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)
