"""Regression tests for raw-key decoding.

Covers ESC timing, composite escape sequences, and control-key tokens.
Bytes are fed through a pipe so the real select/read path is exercised.
"""

from __future__ import annotations

import errno
import os
import time
import unittest
from unittest import mock

from lineview import input as input_mod
from lineview.errors import IoError


def _keys_from(payload: bytes, count: int = 1) -> list[str]:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, payload)
        return [input_mod.read_key(read_fd, timeout_ms=20, escape_timeout_ms=20) for _ in range(count)]
    finally:
        os.close(read_fd)
        os.close(write_fd)


class ReadKeyEscapeSequenceTests(unittest.TestCase):
    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(_keys_from(b"\x1b[A"), ["UP"])
        self.assertEqual(_keys_from(b"\x1b[B"), ["DOWN"])
        self.assertEqual(_keys_from(b"\x1b[C"), ["RIGHT"])
        self.assertEqual(_keys_from(b"\x1b[D"), ["LEFT"])

    def test_tilde_sequences_map_digits_to_composite_keys(self) -> None:
        expected = {
            b"1": "HOME",
            b"7": "HOME",
            b"3": "DELETE",
            b"4": "END",
            b"8": "END",
            b"5": "PAGE_UP",
            b"6": "PAGE_DOWN",
        }
        for digit, key in expected.items():
            with self.subTest(digit=digit):
                self.assertEqual(_keys_from(b"\x1b[" + digit + b"~"), [key])

    def test_letter_and_ss3_home_end_variants(self) -> None:
        self.assertEqual(_keys_from(b"\x1b[H"), ["HOME"])
        self.assertEqual(_keys_from(b"\x1b[F"), ["END"])
        self.assertEqual(_keys_from(b"\x1bOH"), ["HOME"])
        self.assertEqual(_keys_from(b"\x1bOF"), ["END"])

    def test_unmapped_sequences_degrade_to_escape(self) -> None:
        self.assertEqual(_keys_from(b"\x1b[Z"), ["ESC"])
        self.assertEqual(_keys_from(b"\x1b[2~"), ["ESC"])
        self.assertEqual(_keys_from(b"\x1b[5x"), ["ESC"])
        self.assertEqual(_keys_from(b"\x1bOA"), ["ESC"])
        self.assertEqual(_keys_from(b"\x1bxy"), ["ESC"])

    def test_unmapped_sequence_bytes_are_consumed(self) -> None:
        self.assertEqual(_keys_from(b"\x1b[Zq", count=2), ["ESC", "q"])

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20, escape_timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.5)

    def test_truncated_sequences_time_out_to_escape(self) -> None:
        self.assertEqual(_keys_from(b"\x1b["), ["ESC"])
        self.assertEqual(_keys_from(b"\x1b[3"), ["ESC"])


class ReadKeyLiteralTests(unittest.TestCase):
    def test_printable_bytes_are_returned_as_characters(self) -> None:
        self.assertEqual(_keys_from(b"a~ ", count=3), ["a", "~", " "])

    def test_ctrl_q_is_the_quit_key(self) -> None:
        self.assertEqual(_keys_from(b"\x11"), [input_mod.QUIT_KEY])

    def test_control_bytes_map_to_named_tokens(self) -> None:
        self.assertEqual(
            _keys_from(b"\x01\t\r\n\x7f\x08\x00\x1c", count=8),
            ["CTRL_A", "TAB", "ENTER_CR", "ENTER_LF", "BACKSPACE", "BACKSPACE", "NUL", "CTRL_0x1C"],
        )

    def test_high_bytes_decode_one_to_one(self) -> None:
        self.assertEqual(_keys_from(b"\xff"), ["\xff"])

    def test_timed_read_without_data_returns_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            self.assertEqual(input_mod.read_key(read_fd, timeout_ms=10), "")
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_untimed_read_polls_until_a_byte_arrives(self) -> None:
        results = iter([None, None, ord("k")])
        with mock.patch("lineview.input.reader._read_ready_byte", side_effect=lambda fd, ms: next(results)):
            self.assertEqual(input_mod.read_key(0, poll_ms=1), "k")


class ReadKeyErrorTests(unittest.TestCase):
    def test_read_failure_raises_io_error(self) -> None:
        with mock.patch("lineview.input.reader.select.select", return_value=([0], [], [])), mock.patch(
            "lineview.input.reader.os.read", side_effect=OSError(errno.EIO, "Input/output error")
        ):
            with self.assertRaises(IoError) as ctx:
                input_mod.read_key(0, timeout_ms=10)

        self.assertEqual(str(ctx.exception), "read: Input/output error")

    def test_would_block_is_treated_as_no_data(self) -> None:
        with mock.patch("lineview.input.reader.select.select", return_value=([0], [], [])), mock.patch(
            "lineview.input.reader.os.read", side_effect=BlockingIOError(errno.EAGAIN, "again")
        ):
            self.assertEqual(input_mod.read_key(0, timeout_ms=10), "")


class EscapeDecoderTests(unittest.TestCase):
    def test_decoder_needs_two_bytes_before_deciding(self) -> None:
        decoder = input_mod.EscapeDecoder()
        self.assertIsNone(decoder.feed(ord("[")))
        self.assertEqual(decoder.feed(ord("A")), "UP")

    def test_digit_sequences_buffer_at_most_three_bytes(self) -> None:
        decoder = input_mod.EscapeDecoder()
        self.assertIsNone(decoder.feed(ord("[")))
        self.assertIsNone(decoder.feed(ord("6")))
        self.assertEqual(decoder.feed(ord("~")), "PAGE_DOWN")
        self.assertEqual(len(decoder.lookahead), input_mod.EscapeDecoder.MAX_LOOKAHEAD)

    def test_timeout_outcome_is_bare_escape(self) -> None:
        decoder = input_mod.EscapeDecoder()
        decoder.feed(ord("["))
        self.assertEqual(decoder.timed_out(), "ESC")


if __name__ == "__main__":
    unittest.main()
