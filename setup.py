"""
Setup script for installing the pkgmgr package manager shim.
"""
from setuptools import setup, find_packages

setup(
    name='pkgmgr-shim',
    version='1.0.0',
    description='Run npm, pnpm, yarn or bun: whichever one invoked you',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'colorama>=0.4.6',
        'tabulate>=0.9.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-mock>=3.10',
        ],
    },
    entry_points={
        'console_scripts': [
            'pkgmgr=pkgmgr.cli:main',
            'pkgmgrx=pkgmgr.cli:main_exec',
            'pkgmgr-which=pkgmgr.cli:main_which',
        ],
    },
    python_requires='>=3.8',
)
