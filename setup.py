# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='dledit',
  version='0.0.1',
  description='Damerau-Levenshtein edit distance by the methods of Lowrance & Wagner, Ukkonen, and Berghel & Roach.',
  python_requires='>=3.10',
  packages=['dledit', 'dledit.bin', 'utest'],
  entry_points={'console_scripts': ['dl = dledit.bin.dl:main']},
)
