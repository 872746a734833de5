"""
pkgmgr - run the package manager that invoked you.
"""

__version__ = '1.0.0'
