"""
Development runner: starts the app straight from the source tree.

    $ python run.py [path/to/volcanoes.csv] [--log-level DEBUG]

Equivalent to `python -m volcanomap` after `pip install -e .`.
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from volcanomap.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
