"""Make the package under test importable when running from a source checkout."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import authorstat  # noqa: E402, F401
