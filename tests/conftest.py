"""
Pytest configuration for tritri tests.
Adds src/ (for 'import tritri') and the project root (for 'tests.test_fixtures')
to sys.path so tests run without an editable install.
"""
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
src_path = project_root / "src"

for path in (src_path, project_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
