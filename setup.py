# -*- coding: utf-8 -*-
"""The setup script."""
from setuptools import setup

# See setup.cfg for all options and MANIFEST.in for data files
setup()
