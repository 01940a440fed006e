#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/__main__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import sys

from .demo import run

sys.exit(run())
