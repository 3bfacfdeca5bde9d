"""State-specific scanner mixins for the lexer.

Each mixin provides the scanning logic for a group of lexer states.
"""

from incrusta.lexer.scanners.data import DataScannerMixin
from incrusta.lexer.scanners.media import MediaTypeScannerMixin
from incrusta.lexer.scanners.params import ParamScannerMixin

__all__ = [
    "DataScannerMixin",
    "MediaTypeScannerMixin",
    "ParamScannerMixin",
]
