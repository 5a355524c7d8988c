"""
ESC/POS Buffer Builder.

Provides a chainable API that accumulates printer commands, in call
order, into a single byte stream ready for any raw transport (serial,
USB, network socket).

Example:
    data = (
        BufferBuilder()
        .start_align(Alignment.CENTER)
        .start_bold()
        .print_text_line("RECEIPT")
        .end_bold()
        .print_barcode("12345678", BarcodeSystem.CODE_128)
        .paper_cut()
        .build()
    )
"""

import codecs
from typing import Optional, Sequence

from .commands import ESCPOSCommands
from .options import (
    Alignment,
    BarcodeLabelFont,
    BarcodeLabelPosition,
    BarcodeWidth,
    BitmapScale,
    PaperCutMode,
    QRErrorCorrection,
    UnderlineMode,
)

DEFAULT_BARCODE_HEIGHT = 162
DEFAULT_QR_VERSION = 3
DEFAULT_QR_SIZE = 8


# --- Exception Classes ---


class BufferBuilderError(Exception):
    """Base exception for all buffer builder errors."""

    pass


class TextEncodingError(BufferBuilderError, ValueError):
    """Text cannot be represented in the builder's single-byte encoding."""

    pass


class BufferBuilder:
    """
    Stateful ESC/POS command accumulator.

    Every formatting and print method appends its encoded bytes and
    returns ``self``. Toggle pairs (start/end) are independent calls;
    nothing tracks whether they are balanced.

    With ``default_settings`` enabled the builder resets character size
    and code table on construction, and ``build()`` appends a line feed
    followed by ESC @ before returning the stream.
    """

    DEFAULT_ENCODING = "ascii"
    DEFAULT_ERRORS = "strict"

    def __init__(self, default_settings: bool = True,
                 encoding: str = DEFAULT_ENCODING,
                 errors: str = DEFAULT_ERRORS):
        """
        Initialize builder.

        Args:
            default_settings: Bracket the stream with reset/initialize commands
            encoding: Python codec for the printer's code page (e.g. "cp437")
            errors: Codec error handler; "strict" raises TextEncodingError,
                "replace" and "ignore" substitute or drop characters

        Raises:
            TextEncodingError: If the encoding or error handler is unknown
        """
        self._commands: list[bytes] = []
        self._default_settings = default_settings
        self._encoding = encoding
        self._errors = errors
        self._debug = False

        try:
            codecs.lookup(encoding)
            codecs.lookup_error(errors)
        except LookupError as e:
            raise TextEncodingError(f"Unknown text encoding setting: {e}") from e

        if self._default_settings:
            self.reset_character_size()
            self.reset_character_code_table()

    @property
    def default_settings(self) -> bool:
        """Whether the stream is bracketed with reset/initialize commands."""
        return self._default_settings

    @property
    def encoding(self) -> str:
        return self._encoding

    def set_debug(self, enabled: bool):
        """Enable/disable debug output."""
        self._debug = enabled

    def _log(self, message: str):
        """Print debug message if enabled."""
        if self._debug:
            print(f"[ESC/POS] {message}")

    def _add(self, data: bytes) -> "BufferBuilder":
        """Append an encoded command and return self for chaining."""
        self._commands.append(data)
        return self

    def _encode(self, text: str) -> bytes:
        """Transcode text to the printer's single-byte encoding."""
        try:
            return text.encode(self._encoding, self._errors)
        except UnicodeEncodeError as e:
            raise TextEncodingError(
                f"Cannot encode {text[e.start:e.end]!r} at position {e.start} "
                f"with encoding '{self._encoding}'"
            ) from e

    def end(self) -> "BufferBuilder":
        """No-op chain terminator."""
        return self

    # ---- Character Commands ----

    def reset_character_code_table(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.select_character_code_table(0))

    def set_character_size(self, width: int = 0, height: int = 0) -> "BufferBuilder":
        """
        Set character magnification.

        Args:
            width: Horizontal magnification 0-15
            height: Vertical magnification 0-15

        Out-of-range values are packed as ``(width << 4) | height`` and
        truncated to one byte, not clamped.
        """
        return self._add(ESCPOSCommands.character_size(width, height))

    def reset_character_size(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.character_size(0, 0))

    def start_compressed_character(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.compressed_character(True))

    def end_compressed_character(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.compressed_character(False))

    def start_bold(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.bold(True))

    def end_bold(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.bold(False))

    def start_underline(
        self, underline_mode: int = UnderlineMode.TWO_POINTS_OF_COARSE
    ) -> "BufferBuilder":
        return self._add(ESCPOSCommands.underline(underline_mode))

    def end_underline(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.underline(UnderlineMode.OFF))

    def start_align(self, alignment: int) -> "BufferBuilder":
        """Set justification; applies from the start of the next line."""
        return self._add(ESCPOSCommands.align(alignment))

    def reset_align(self) -> "BufferBuilder":
        return self.start_align(Alignment.LEFT)

    def start_white_mode(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.white_mode(True))

    def end_white_mode(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.white_mode(False))

    def start_reverse_mode(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.reverse_mode(True))

    def end_reverse_mode(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.reverse_mode(False))

    # ---- Barcode Commands ----

    def print_barcode(
        self,
        data: str,
        barcode_system: int,
        width: int = BarcodeWidth.DOT_375,
        height: int = DEFAULT_BARCODE_HEIGHT,
        label_font: int = BarcodeLabelFont.FONT_A,
        label_position: int = BarcodeLabelPosition.BOTTOM,
        left_spacing: int = 0,
    ) -> "BufferBuilder":
        """
        Print a 1D barcode.

        Args:
            data: Barcode content (must fit the builder's encoding)
            barcode_system: Symbology (BarcodeSystem)
            width: Module width class (BarcodeWidth)
            height: Bar height in dots (0-255)
            label_font: HRI font (BarcodeLabelFont)
            label_position: HRI position (BarcodeLabelPosition)
            left_spacing: Left spacing in dots

        Emits width, height, left spacing, label font and label position
        commands, then the GS k payload. The symbol itself is not
        validated; only the payload length is checked.

        Raises:
            TextEncodingError: If data cannot be encoded
            PayloadTooLongError: If encoded data exceeds 255 bytes
        """
        # Encode first so a rejected payload leaves the buffer untouched.
        payload = ESCPOSCommands.barcode(barcode_system, self._encode(data))
        self._add(ESCPOSCommands.barcode_parameters(
            width, height, left_spacing, label_font, label_position,
        ))
        return self._add(payload)

    def print_qr_code(
        self,
        data: str,
        version: int = DEFAULT_QR_VERSION,
        level: int = QRErrorCorrection.H,
        size: int = DEFAULT_QR_SIZE,
    ) -> "BufferBuilder":
        """
        Print a QR code.

        Args:
            data: QR content (URL, text, etc.)
            version: Symbol version
            level: Error correction (QRErrorCorrection)
            size: Module size in dots

        Raises:
            TextEncodingError: If data cannot be encoded
            PayloadTooLongError: If encoded data exceeds 65535 bytes
        """
        payload = self._encode(data)
        return self._add(ESCPOSCommands.qr_code(payload, version, level, size))

    def print_bitmap(
        self,
        image: Sequence[int],
        width: int,
        height: int,
        scale: int = BitmapScale.NORMAL,
    ) -> "BufferBuilder":
        """
        Raster printing is not supported; this appends nothing.

        Kept so callers can chain it without branching. The buffer is
        left unchanged and the builder is returned.
        """
        self._log(f"print_bitmap({width}x{height}, scale={scale!r}) is not supported, skipped")
        return self

    # ---- Text Commands ----

    def print_text(self, text: str) -> "BufferBuilder":
        """
        Append text in the builder's encoding.

        Raises:
            TextEncodingError: If a character has no mapping and errors="strict"
        """
        return self._add(self._encode(text))

    def print_text_line(self, text: str) -> "BufferBuilder":
        return self.print_text(text).break_line()

    # ---- Paper Commands ----

    def break_line(self, lines: int = 0) -> "BufferBuilder":
        """Print and feed ``lines`` lines (0 = printer default)."""
        return self._add(ESCPOSCommands.break_line(lines))

    def line_feed(self) -> "BufferBuilder":
        return self._add(ESCPOSCommands.line_feed())

    def paper_cut(self, mode: int = PaperCutMode.FULL) -> "BufferBuilder":
        """Cut the paper (PaperCutMode.PARTIAL or PaperCutMode.FULL)."""
        return self._add(ESCPOSCommands.paper_cut(mode))

    # ---- Status Commands ----

    def transmit_status(self, status_type: int) -> "BufferBuilder":
        """Request a real-time status byte (StatusType)."""
        return self._add(ESCPOSCommands.transmit_status(status_type))

    # ---- Output ----

    def build(self) -> bytes:
        """
        Finish the stream and return it.

        With default settings, a line feed and ESC @ are appended first.
        The builder is not reset: calling any method (including build)
        afterwards is undefined and may append a second trailer.

        Returns:
            Complete ESC/POS command stream
        """
        if self._default_settings:
            self.line_feed()
            self._add(ESCPOSCommands.initialize())

        data = b"".join(self._commands)
        self._log(f"Built {len(data)} bytes from {len(self._commands)} commands")
        return data


def build_text_job(lines: Sequence[str], alignment: Optional[int] = None,
                   cut: bool = True, encoding: str = BufferBuilder.DEFAULT_ENCODING) -> bytes:
    """
    Create a complete print job for plain text lines.

    Args:
        lines: Text lines to print
        alignment: Justification for all lines (None keeps printer default)
        cut: Whether to cut the paper at the end
        encoding: Printer code page

    Returns:
        Complete ESC/POS command stream as bytes
    """
    builder = BufferBuilder(encoding=encoding)
    if alignment is not None:
        builder.start_align(alignment)
    for line in lines:
        builder.print_text_line(line)
    if cut:
        builder.paper_cut()
    return builder.build()
