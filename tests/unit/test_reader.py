"""Tests for the line reader: 11-byte lines, termination, hex errors."""

import io

import pytest

from mipsstat.reader import InputParseError, parse_line, read_words


def _stream(data: bytes) -> io.BytesIO:
    return io.BytesIO(data)


class TestParseLine:
    def test_uppercase(self):
        assert parse_line(b"0x08000005\n") == 0x08000005

    def test_lowercase(self):
        assert parse_line(b"0xdeadbeef\n") == 0xDEADBEEF

    def test_prefix_is_not_checked(self):
        assert parse_line(b"XX0000000A\n") == 0x0A

    @pytest.mark.parametrize(
        "line", [b"0xZZZZZZZZ\n", b"0x0000000g\n", b"0x+0000001\n", b"0x 0000001\n"]
    )
    def test_invalid_digits(self, line):
        with pytest.raises(InputParseError):
            parse_line(line)

    def test_non_ascii_digits(self):
        # "é" is two bytes, so the line is still 11 bytes long
        with pytest.raises(InputParseError):
            parse_line("0x123456é\n".encode("utf-8"))

    def test_error_carries_line_number_and_text(self):
        with pytest.raises(InputParseError) as exc_info:
            parse_line(b"0xZZZZZZZZ\n", line_number=3)
        assert exc_info.value.line_number == 3
        assert exc_info.value.text == "ZZZZZZZZ"
        assert "line 3" in str(exc_info.value)

    def test_is_value_error(self):
        assert issubclass(InputParseError, ValueError)


class TestReadWords:
    def test_reads_until_eof(self):
        words = read_words(_stream(b"0x00000000\n0x08000005\n0xFFFFFFFF\n"))
        assert words == [0x00000000, 0x08000005, 0xFFFFFFFF]

    def test_empty_input(self):
        assert read_words(_stream(b"")) == []

    def test_short_line_stops_input(self):
        words = read_words(_stream(b"0x00000001\n0x0002\n0x00000003\n"))
        assert words == [1]

    def test_long_line_stops_input(self):
        words = read_words(_stream(b"0x00000001\n0x000000002\n0x00000003\n"))
        assert words == [1]

    def test_blank_line_stops_input(self):
        words = read_words(_stream(b"0x00000001\n\n0x00000003\n"))
        assert words == [1]

    def test_crlf_line_is_too_long(self):
        assert read_words(_stream(b"0x00000001\r\n")) == []

    def test_lone_carriage_return_does_not_split_lines(self):
        # one 22-byte line
        assert read_words(_stream(b"0x00000000\r0x00000000\n")) == []

    def test_multibyte_character_makes_line_too_long(self):
        # 11 characters but 12 bytes: end of input, not a parse error
        data = "0x00000001\n0x1234567é\n".encode("utf-8")
        assert read_words(_stream(data)) == [1]

    def test_missing_final_newline_stops_input(self):
        words = read_words(_stream(b"0x00000001\n0x00000002"))
        assert words == [1]

    def test_invalid_hex_raises(self):
        with pytest.raises(InputParseError) as exc_info:
            read_words(_stream(b"0x00000001\n0xZZZZZZZZ\n"))
        assert exc_info.value.line_number == 2

    def test_invalid_hex_after_terminator_is_never_read(self):
        assert read_words(_stream(b"0x00000001\nshort\n0xZZZZZZZZ\n")) == [1]

    def test_read_error_propagates(self):
        class BrokenStream:
            def readline(self):
                raise OSError("device gone")

        with pytest.raises(OSError):
            read_words(BrokenStream())
