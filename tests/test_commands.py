"""Tests for the ESC/POS command encoding table."""

import pytest

from escpos_buffer.commands import (
    ESCPOSCommands,
    MAX_BARCODE_LENGTH,
    PayloadTooLongError,
)
from escpos_buffer.options import (
    Alignment,
    BarcodeLabelFont,
    BarcodeLabelPosition,
    BarcodeSystem,
    BarcodeWidth,
    PaperCutMode,
    QRErrorCorrection,
    StatusType,
    UnderlineMode,
)


class TestCharacterCommands:
    """Test character formatting encodings."""

    def test_code_table_reset(self):
        """Test ESC t 0."""
        assert ESCPOSCommands.select_character_code_table() == b"\x1b\x74\x00"

    def test_character_size_packing(self):
        """Test width goes to the upper nibble, height to the lower."""
        assert ESCPOSCommands.character_size(1, 2) == b"\x1d\x21\x12"
        assert ESCPOSCommands.character_size(15, 15) == b"\x1d\x21\xff"
        assert ESCPOSCommands.character_size(0, 0) == b"\x1d\x21\x00"

    def test_character_size_all_valid_values(self):
        """Test packing across the full 0-15 range."""
        for width in range(16):
            for height in range(16):
                encoded = ESCPOSCommands.character_size(width, height)
                assert encoded[2] == (width << 4) | height

    def test_character_size_wraps_not_clamps(self):
        """Test out-of-range sizes truncate via the packing arithmetic."""
        # 16 << 4 = 256 -> low byte 0x00
        assert ESCPOSCommands.character_size(16, 0)[2] == 0x00
        # 17 << 4 = 272 = 0x110 -> 0x10
        assert ESCPOSCommands.character_size(17, 0)[2] == 0x10
        # height 16 overlaps the width nibble: (1 << 4) | 16 = 0x10
        assert ESCPOSCommands.character_size(1, 16)[2] == 0x10
        # height 20 = 0x14: (2 << 4) | 0x14 = 0x34
        assert ESCPOSCommands.character_size(2, 20)[2] == 0x34

    def test_compressed_character(self):
        """Test ESC M toggles."""
        assert ESCPOSCommands.compressed_character(True) == b"\x1b\x4d\x01"
        assert ESCPOSCommands.compressed_character(False) == b"\x1b\x4d\x00"

    def test_bold(self):
        """Test ESC E toggles."""
        assert ESCPOSCommands.bold(True) == b"\x1b\x45\x01"
        assert ESCPOSCommands.bold(False) == b"\x1b\x45\x00"

    def test_underline(self):
        """Test ESC - with each mode."""
        assert ESCPOSCommands.underline(UnderlineMode.ONE_POINT_OF_COARSE) == b"\x1b\x2d\x31"
        assert ESCPOSCommands.underline(UnderlineMode.TWO_POINTS_OF_COARSE) == b"\x1b\x2d\x32"
        assert ESCPOSCommands.underline(UnderlineMode.OFF) == b"\x1b\x2d\x30"

    def test_align(self):
        """Test ESC a with each alignment."""
        assert ESCPOSCommands.align(Alignment.LEFT) == b"\x1b\x61\x30"
        assert ESCPOSCommands.align(Alignment.CENTER) == b"\x1b\x61\x31"
        assert ESCPOSCommands.align(Alignment.RIGHT) == b"\x1b\x61\x32"

    def test_align_out_of_set_forwarded(self):
        """Test unknown alignment codes are encoded as given."""
        assert ESCPOSCommands.align(7) == b"\x1b\x61\x07"

    def test_white_mode(self):
        """Test GS B toggles."""
        assert ESCPOSCommands.white_mode(True) == b"\x1d\x42\x01"
        assert ESCPOSCommands.white_mode(False) == b"\x1d\x42\x00"

    def test_reverse_mode(self):
        """Test ESC { toggles."""
        assert ESCPOSCommands.reverse_mode(True) == b"\x1b\x7b\x01"
        assert ESCPOSCommands.reverse_mode(False) == b"\x1b\x7b\x00"


class TestBarcodeCommands:
    """Test barcode encodings."""

    def test_parameter_commands(self):
        """Test each GS parameter command."""
        assert ESCPOSCommands.barcode_width(BarcodeWidth.DOT_375) == b"\x1d\x77\x03"
        assert ESCPOSCommands.barcode_height(162) == b"\x1d\x68\xa2"
        assert ESCPOSCommands.barcode_left_spacing(0) == b"\x1d\x78\x00"
        assert ESCPOSCommands.barcode_label_font(BarcodeLabelFont.FONT_B) == b"\x1d\x66\x31"
        assert ESCPOSCommands.barcode_label_position(BarcodeLabelPosition.ABOVE) == b"\x1d\x48\x31"

    def test_parameters_order(self):
        """Test width, height, spacing, font, position order."""
        encoded = ESCPOSCommands.barcode_parameters(
            BarcodeWidth.DOT_560, 100, 5,
            BarcodeLabelFont.FONT_A, BarcodeLabelPosition.NOT_PRINT,
        )
        assert encoded == (
            b"\x1d\x77\x04"
            b"\x1d\x68\x64"
            b"\x1d\x78\x05"
            b"\x1d\x66\x30"
            b"\x1d\x48\x30"
        )

    def test_barcode_payload(self):
        """Test GS k with symbology, length and raw data."""
        encoded = ESCPOSCommands.barcode(BarcodeSystem.CODE_128, b"ABC123")
        assert encoded == b"\x1d\x6b\x49\x06ABC123"

    def test_barcode_empty_payload(self):
        """Test zero-length payload is encoded with length 0."""
        assert ESCPOSCommands.barcode(BarcodeSystem.EAN_13, b"") == b"\x1d\x6b\x43\x00"

    def test_barcode_max_length(self):
        """Test 255-byte payload is accepted."""
        data = b"1" * MAX_BARCODE_LENGTH
        encoded = ESCPOSCommands.barcode(BarcodeSystem.CODE_39, data)
        assert encoded[3] == 255
        assert encoded[4:] == data

    def test_barcode_too_long(self):
        """Test payload over 255 bytes is rejected."""
        with pytest.raises(PayloadTooLongError):
            ESCPOSCommands.barcode(BarcodeSystem.CODE_39, b"1" * 256)

    def test_height_wraps(self):
        """Test height above 255 is byte-wrapped."""
        assert ESCPOSCommands.barcode_height(256 + 10) == b"\x1d\x68\x0a"


class TestQRCommand:
    """Test QR code encoding."""

    def test_qr_layout(self):
        """Test prefix, version, level, size, LE length and data."""
        encoded = ESCPOSCommands.qr_code(b"AB", 3, QRErrorCorrection.H, 8)
        assert encoded == bytes([0x1B, 0x5A, 3, 3, 8, 2, 0]) + b"AB"

    def test_qr_length_little_endian(self):
        """Test 16-bit length with a non-zero high byte."""
        data = b"x" * 300  # 0x012C
        encoded = ESCPOSCommands.qr_code(data, 1, QRErrorCorrection.L, 4)
        assert encoded[5] == 0x2C
        assert encoded[6] == 0x01
        assert encoded[7:] == data

    def test_qr_too_long(self):
        """Test payload over 65535 bytes is rejected."""
        with pytest.raises(PayloadTooLongError):
            ESCPOSCommands.qr_code(b"x" * 65536)


class TestPaperAndControlCommands:
    """Test paper handling and control encodings."""

    def test_break_line(self):
        """Test ESC d n."""
        assert ESCPOSCommands.break_line() == b"\x1b\x64\x00"
        assert ESCPOSCommands.break_line(3) == b"\x1b\x64\x03"

    def test_line_feed(self):
        """Test LF."""
        assert ESCPOSCommands.line_feed() == b"\x0a"

    def test_paper_cut(self):
        """Test GS V m."""
        assert ESCPOSCommands.paper_cut(PaperCutMode.FULL) == b"\x1d\x56\x01"
        assert ESCPOSCommands.paper_cut(PaperCutMode.PARTIAL) == b"\x1d\x56\x00"

    def test_transmit_status(self):
        """Test DLE EOT n for each status type."""
        for status in StatusType:
            assert ESCPOSCommands.transmit_status(status) == bytes([0x10, 0x04, int(status)])

    def test_initialize(self):
        """Test ESC @."""
        assert ESCPOSCommands.initialize() == b"\x1b\x40"

    def test_non_integer_parameter_rejected(self):
        """Test floats are not silently truncated to a byte."""
        with pytest.raises(TypeError):
            ESCPOSCommands.break_line(2.7)
        with pytest.raises(TypeError):
            ESCPOSCommands.barcode_height(100.5)

    def test_bool_and_enum_parameters(self):
        """Test ints, bools and IntEnum members are accepted."""
        assert ESCPOSCommands.break_line(True) == b"\x1b\x64\x01"
        assert ESCPOSCommands.paper_cut(PaperCutMode.PARTIAL) == b"\x1d\x56\x00"

    def test_deterministic(self):
        """Test identical calls yield identical bytes."""
        assert ESCPOSCommands.qr_code(b"hi") == ESCPOSCommands.qr_code(b"hi")
        assert ESCPOSCommands.character_size(3, 4) == ESCPOSCommands.character_size(3, 4)


class TestOptionValues:
    """Verify protocol-mandated option values."""

    def test_barcode_systems(self):
        """Test symbology codes span 65-73."""
        assert [int(s) for s in BarcodeSystem] == list(range(65, 74))

    def test_barcode_widths(self):
        """Test width classes span 2-6."""
        assert [int(w) for w in BarcodeWidth] == list(range(2, 7))

    def test_qr_levels(self):
        """Test EC levels L, M, Q, H map to 0-3."""
        assert QRErrorCorrection.L == 0
        assert QRErrorCorrection.H == 3
