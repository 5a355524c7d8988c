"""ESC/POS command buffer builder for thermal receipt printers."""

__version__ = "0.1.0"

from .builder import (
    BufferBuilder,
    BufferBuilderError,
    TextEncodingError,
    build_text_job,
)
from .commands import ESCPOSCommands, PayloadTooLongError
from .options import (
    Alignment,
    BarcodeLabelFont,
    BarcodeLabelPosition,
    BarcodeSystem,
    BarcodeWidth,
    BitmapScale,
    PaperCutMode,
    QRErrorCorrection,
    StatusType,
    UnderlineMode,
)

__all__ = [
    "BufferBuilder",
    "BufferBuilderError",
    "TextEncodingError",
    "PayloadTooLongError",
    "build_text_job",
    "ESCPOSCommands",
    "Alignment",
    "BarcodeLabelFont",
    "BarcodeLabelPosition",
    "BarcodeSystem",
    "BarcodeWidth",
    "BitmapScale",
    "PaperCutMode",
    "QRErrorCorrection",
    "StatusType",
    "UnderlineMode",
]
