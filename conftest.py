"""Configure pytest."""

import os
import sys
from pathlib import Path

# Get the project root directory
root_dir = Path(__file__).parent

# Add src directory to Python path
src_path = str(root_dir / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

# Keep rich output plain so CLI assertions see unstyled text
os.environ.setdefault("UTF8SWEEP_NO_RICH", "1")
