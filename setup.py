#!/usr/bin/env python

import re

from setuptools import setup, find_packages

with open("addrspec/__init__.py") as fh:
    version = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.M).group(1)

setup(name='addrspec',
      version=version,
      description='addrspec validates RFC5322 / RFC6532 email addresses.',
      long_description=open("README.md").read(),
      long_description_content_type="text/markdown",
      license = "MIT",
      packages=find_packages(exclude=["test", "test.*"]),
      package_dir={'addrspec': 'addrspec'},
      scripts=['bin/addrspec_cli'],
      python_requires=">=3.8",
      install_requires=[
          'markdown >= 3.0',
          'markupsafe >= 2.0',
          'netaddr >= 0.8.0',
          'typing_extensions >= 4.0'
      ],
      extras_require={
          'dev': [
          'mypy',
          'pytest'
          ]
      },
      classifiers=[
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Communications :: Email',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: MIT License',
      ],
)
