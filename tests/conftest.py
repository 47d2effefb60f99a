"""Configuration file for pytest."""

import sys
from pathlib import Path

# Add the src directory to the path so tests can import the package without installing it,
# and the tests directory so shared fixtures can be imported
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))
