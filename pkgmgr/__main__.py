"""
Allows running the shim as: python -m pkgmgr <args>
"""
from pkgmgr.cli import main

if __name__ == '__main__':
    main()
