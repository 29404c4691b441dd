"""
Scytale Entry Point
====================

Allows running the CLI via: python -m scytale
"""

from scytale.cli import main

if __name__ == "__main__":
    main()
