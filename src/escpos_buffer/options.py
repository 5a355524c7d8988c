"""
ESC/POS Option Sets.

Closed sets of wire values accepted by specific printer commands.
Values are fixed by the ESC/POS protocol; the encoder also accepts
plain ints and forwards out-of-set values unchanged.
"""

from enum import IntEnum


class UnderlineMode(IntEnum):
    """Underline thickness for ESC -."""
    OFF = 48
    ONE_POINT_OF_COARSE = 49
    TWO_POINTS_OF_COARSE = 50


class Alignment(IntEnum):
    """Text justification for ESC a."""
    LEFT = 48
    CENTER = 49
    RIGHT = 50


class BarcodeSystem(IntEnum):
    """Barcode symbologies for GS k (function B)."""
    UPC_A = 65
    UPC_E = 66
    EAN_13 = 67
    EAN_8 = 68
    CODE_39 = 69
    ITF = 70
    CODABAR = 71
    CODE_93 = 72
    CODE_128 = 73


class BarcodeWidth(IntEnum):
    """Module width classes for GS w."""
    DOT_250 = 2
    DOT_375 = 3
    DOT_560 = 4
    DOT_625 = 5
    DOT_750 = 6


class BarcodeLabelFont(IntEnum):
    """HRI font for GS f."""
    FONT_A = 48
    FONT_B = 49


class BarcodeLabelPosition(IntEnum):
    """HRI position for GS H."""
    NOT_PRINT = 48
    ABOVE = 49
    BOTTOM = 50
    ABOVE_BOTTOM = 51


class QRErrorCorrection(IntEnum):
    """QR error correction levels (L=7%, M=15%, Q=25%, H=30%)."""
    L = 0
    M = 1
    Q = 2
    H = 3


class BitmapScale(IntEnum):
    """Raster scaling modes."""
    NORMAL = 48
    DOUBLE_WIDTH = 49
    DOUBLE_HEIGHT = 50
    FOUR_TIMES = 51


class StatusType(IntEnum):
    """Real-time status queries for DLE EOT."""
    PRINTER_STATUS = 1
    OFFLINE_STATUS = 2
    ERROR_STATUS = 3
    PAPER_ROLL_SENSOR_STATUS = 4


class PaperCutMode(IntEnum):
    """Cut modes for GS V."""
    PARTIAL = 0
    FULL = 1
