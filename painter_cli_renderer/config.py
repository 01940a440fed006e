#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import os
from dataclasses import dataclass

from .camera import Camera, PROJECTIONS, PERSPECTIVE


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    projection: str = PERSPECTIVE
    cube_size: float = 10.0
    focal_length: float = 20.0
    use_lighting: bool = True
    use_culling: bool = True
    use_color: bool = True
    use_braille: bool = True

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.projection not in PROJECTIONS:
            raise ValueError(
                f"Unknown projection '{self.projection}', expected one of {PROJECTIONS}")
        if self.cube_size == 0:
            raise ValueError("cube_size must be non-zero")
        if self.focal_length <= 0:
            raise ValueError("focal_length must be positive")

    def camera(self) -> Camera:
        return Camera(self.projection, self.cube_size, self.focal_length)

    def window(self):
        """Logical rectangle that projected geometry lands in."""
        return self.camera().window()

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        settings = dict(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
        settings.update(overrides)
        return cls(**settings)
