"""
rdelf Module Entry Point
=========================

Allows running the rdelf CLI via: python -m rdelf
"""

from rdelf.cli import main

if __name__ == "__main__":
    main()
