import os
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `desktop_calculator` and `main` are importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

# The Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
