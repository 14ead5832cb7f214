"""Test package initializer.

Ensure the repository root is on `sys.path` so pytest can import
`copywriter` when running single-file tests without an install.
"""

import os
import sys

# Add repository root (parent of the `tests` package) to import path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
