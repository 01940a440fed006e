#!/usr/bin/env python3
#
# PROJECT: painter-cli-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from painter_cli_renderer.demo import run


if __name__ == "__main__":
    sys.exit(run())
