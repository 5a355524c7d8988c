"""
ESC/POS Command Encoding Table.

Each printer command is a short fixed-shape binary record: a control
byte (ESC, GS or DLE), a command byte, then zero or more parameter
bytes. Every method here is a pure function of its arguments.

Single-byte parameters are wrapped with ``& 0xFF`` rather than clamped
or rejected, so out-of-range values reach the printer exactly as a raw
byte buffer would store them.

Reference: Epson ESC/POS Application Programming Guide
"""

import operator

from .options import (
    Alignment,
    BarcodeLabelFont,
    BarcodeLabelPosition,
    BarcodeWidth,
    PaperCutMode,
    QRErrorCorrection,
    UnderlineMode,
)

# Barcode length is a single byte; QR length is uint16.
MAX_BARCODE_LENGTH = 0xFF
MAX_QR_LENGTH = 0xFFFF


class PayloadTooLongError(ValueError):
    """Barcode or QR payload does not fit its length field."""

    pass


def _u8(value: int) -> int:
    return operator.index(value) & 0xFF


class ESCPOSCommands:
    """
    Binary command builders for ESC/POS printers.

    All methods return ``bytes`` ready to append to a command stream.
    """

    ESC = 0x1B
    GS = 0x1D
    DLE = 0x10
    EOT = 0x04
    LF = 0x0A

    # ---- Character Commands ----

    @staticmethod
    def select_character_code_table(table: int = 0) -> bytes:
        """ESC t n - select character code table (0 = PC437)."""
        return bytes([ESCPOSCommands.ESC, 0x74, _u8(table)])

    @staticmethod
    def character_size(width: int = 0, height: int = 0) -> bytes:
        """
        GS ! n - select character size.

        Args:
            width: Horizontal magnification 0-15 (upper nibble)
            height: Vertical magnification 0-15 (lower nibble)

        Values outside 0-15 are not clamped: they are packed with the
        same arithmetic and the result is truncated to one byte.
        """
        return bytes([ESCPOSCommands.GS, 0x21, _u8((width << 4) | height)])

    @staticmethod
    def compressed_character(enabled: bool) -> bytes:
        """ESC M n - select font B (compressed) or font A."""
        return bytes([ESCPOSCommands.ESC, 0x4D, 1 if enabled else 0])

    @staticmethod
    def bold(enabled: bool) -> bytes:
        """ESC E n - turn emphasized mode on/off."""
        return bytes([ESCPOSCommands.ESC, 0x45, 1 if enabled else 0])

    @staticmethod
    def underline(mode: int = UnderlineMode.TWO_POINTS_OF_COARSE) -> bytes:
        """ESC - n - underline mode (48 turns underline off)."""
        return bytes([ESCPOSCommands.ESC, 0x2D, _u8(mode)])

    @staticmethod
    def align(alignment: int = Alignment.LEFT) -> bytes:
        """ESC a n - select justification."""
        return bytes([ESCPOSCommands.ESC, 0x61, _u8(alignment)])

    @staticmethod
    def white_mode(enabled: bool) -> bytes:
        """GS B n - white/black reverse printing."""
        return bytes([ESCPOSCommands.GS, 0x42, 1 if enabled else 0])

    @staticmethod
    def reverse_mode(enabled: bool) -> bytes:
        """ESC { n - upside-down printing."""
        return bytes([ESCPOSCommands.ESC, 0x7B, 1 if enabled else 0])

    # ---- Barcode Commands ----

    @staticmethod
    def barcode_width(width: int = BarcodeWidth.DOT_375) -> bytes:
        """GS w n - barcode module width."""
        return bytes([ESCPOSCommands.GS, 0x77, _u8(width)])

    @staticmethod
    def barcode_height(height: int = 162) -> bytes:
        """GS h n - barcode height in dots."""
        return bytes([ESCPOSCommands.GS, 0x68, _u8(height)])

    @staticmethod
    def barcode_left_spacing(spacing: int = 0) -> bytes:
        """GS x n - barcode left spacing."""
        return bytes([ESCPOSCommands.GS, 0x78, _u8(spacing)])

    @staticmethod
    def barcode_label_font(font: int = BarcodeLabelFont.FONT_A) -> bytes:
        """GS f n - HRI character font."""
        return bytes([ESCPOSCommands.GS, 0x66, _u8(font)])

    @staticmethod
    def barcode_label_position(position: int = BarcodeLabelPosition.BOTTOM) -> bytes:
        """GS H n - HRI character print position."""
        return bytes([ESCPOSCommands.GS, 0x48, _u8(position)])

    @staticmethod
    def barcode_parameters(
        width: int = BarcodeWidth.DOT_375,
        height: int = 162,
        left_spacing: int = 0,
        label_font: int = BarcodeLabelFont.FONT_A,
        label_position: int = BarcodeLabelPosition.BOTTOM,
    ) -> bytes:
        """
        All barcode setup commands in the order the printer expects.

        Each one applies to the next barcode printed, so they must
        precede the payload command.
        """
        return b"".join([
            ESCPOSCommands.barcode_width(width),
            ESCPOSCommands.barcode_height(height),
            ESCPOSCommands.barcode_left_spacing(left_spacing),
            ESCPOSCommands.barcode_label_font(label_font),
            ESCPOSCommands.barcode_label_position(label_position),
        ])

    @staticmethod
    def barcode(system: int, data: bytes) -> bytes:
        """
        GS k m n d1...dn - print barcode (function B).

        Args:
            system: Symbology code (65-73)
            data: Encoded barcode payload, no terminator

        Raises:
            PayloadTooLongError: If data is longer than 255 bytes
        """
        if len(data) > MAX_BARCODE_LENGTH:
            raise PayloadTooLongError(
                f"Barcode data is {len(data)} bytes, maximum is {MAX_BARCODE_LENGTH}"
            )
        return bytes([ESCPOSCommands.GS, 0x6B, _u8(system), len(data)]) + data

    @staticmethod
    def qr_code(
        data: bytes,
        version: int = 3,
        level: int = QRErrorCorrection.H,
        size: int = 8,
    ) -> bytes:
        """
        ESC Z v l s nL nH d1...dn - print QR code.

        Args:
            data: Encoded QR payload
            version: Symbol version
            level: Error correction level (0-3)
            size: Module size in dots

        The length is packed as a little-endian 16-bit value.

        Raises:
            PayloadTooLongError: If data is longer than 65535 bytes
        """
        if len(data) > MAX_QR_LENGTH:
            raise PayloadTooLongError(
                f"QR data is {len(data)} bytes, maximum is {MAX_QR_LENGTH}"
            )
        length = len(data)
        header = bytes([
            ESCPOSCommands.ESC, 0x5A,
            _u8(version), _u8(level), _u8(size),
            length & 0xFF, (length >> 8) & 0xFF,
        ])
        return header + data

    # ---- Paper Commands ----

    @staticmethod
    def break_line(lines: int = 0) -> bytes:
        """ESC d n - print and feed n lines (0 = printer default)."""
        return bytes([ESCPOSCommands.ESC, 0x64, _u8(lines)])

    @staticmethod
    def line_feed() -> bytes:
        """LF - print and line feed."""
        return bytes([ESCPOSCommands.LF])

    @staticmethod
    def paper_cut(mode: int = PaperCutMode.FULL) -> bytes:
        """GS V m - cut paper (0 = partial, 1 = full)."""
        return bytes([ESCPOSCommands.GS, 0x56, _u8(mode)])

    # ---- Status / Control Commands ----

    @staticmethod
    def transmit_status(status_type: int) -> bytes:
        """DLE EOT n - real-time status transmission (n = 1-4)."""
        return bytes([ESCPOSCommands.DLE, ESCPOSCommands.EOT, _u8(status_type)])

    @staticmethod
    def initialize() -> bytes:
        """ESC @ - initialize printer, clearing all modes."""
        return bytes([ESCPOSCommands.ESC, 0x40])
