"""A small command-line argument parser, for embedding in other
programs. Turns a list of strings into positional arguments,
multi-valued options, and multi-occurrence boolean flags.
"""

from setuptools import setup


__author__ = 'Andy Boothe'
__version__ = '0.1.0'
__url__ = 'https://github.com/sigpwned/just-args'
__license__ = 'Unlicense'


setup(name='justargs',
      version=__version__,
      description="A small, embeddable command-line argument parser.",
      long_description=__doc__,
      author=__author__,
      url=__url__,
      packages=['justargs', 'justargs.test'],
      include_package_data=True,
      zip_safe=False,
      license=__license__,
      platforms='any',
      install_requires=['boltons>=20.0.0'],
      extras_require={'test': ['pytest>=6.0']},
      classifiers=[
          'Topic :: Utilities',
          'Intended Audience :: Developers',
          'Topic :: Software Development :: Libraries',
          'Programming Language :: Python :: 3.7',
          'Programming Language :: Python :: 3.8',
          'Programming Language :: Python :: 3.9',
          'Programming Language :: Python :: 3.10',
          'Programming Language :: Python :: 3.11',
          'Programming Language :: Python :: 3.12',
          'Programming Language :: Python :: 3 :: Only',
          'Programming Language :: Python :: Implementation :: CPython',
          'Programming Language :: Python :: Implementation :: PyPy', ]
      )
