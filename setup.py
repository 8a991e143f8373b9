#!/usr/bin/python3

from setuptools import setup

setup(name = "xmlw",
      version = "0.1",
      description = "Streaming, validating XML writer",
      author = "Fredrik Tolf",
      author_email = "fredrik@dolda2000.com",
      packages = ["xmlw"],
      install_requires = ["structlog"],
      extras_require = {"test": ["pytest"]},
      python_requires = ">=3.7",
      license = "GPL-3")
