#! /usr/bin/env python3

from setuptools import setup

setup(name='sudokutech',
      version='0.1.0',
      description='Sudoku solving by brute force and by human techniques',
      author='Joseph Tibbertsma',
      author_email='josephtibbertsma@gmail.com',
      packages=['sudokutech'],
      install_requires=['gmpy2'],
      extras_require={'test': ['pytest']})
