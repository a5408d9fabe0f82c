"""Launch the leverage dashboard under Streamlit with its default server and theme flags."""
import os
import subprocess
import sys
from typing import List, Optional

try:
    from . import config
except ImportError:
    sys.path.append(os.path.dirname(os.path.dirname(__file__)))
    from leverage_dashboard import config

APP_PATH = os.path.join(os.path.dirname(__file__), "app.py")


def build_command(extra_args: Optional[List[str]] = None) -> List[str]:
    # command-line flags follow the defaults and override them
    return [sys.executable, "-m", "streamlit", "run", APP_PATH, *config.STREAMLIT_FLAGS, *(extra_args or [])]


def main() -> int:
    return subprocess.call(build_command(sys.argv[1:]))


if __name__ == "__main__":
    raise SystemExit(main())
