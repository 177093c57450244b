"""
Run with: python -m volcanomap [CSV]
"""
import sys

from volcanomap.main import main

if __name__ == "__main__":
    sys.exit(main())
