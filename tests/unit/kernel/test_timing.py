"""Unit tests for timing_safe_equal."""
from __future__ import annotations

import statistics
import time

import pytest

from secure_webhooks.kernel.security import timing_safe_equal


class TestTimingSafeEqual:
    def test_equal_strings(self):
        assert timing_safe_equal("abc123", "abc123") is True

    def test_equal_bytes(self):
        assert timing_safe_equal(b"\x00\xff", b"\x00\xff") is True

    def test_mixed_str_and_bytes(self):
        assert timing_safe_equal("abc", b"abc") is True

    def test_content_mismatch(self):
        assert timing_safe_equal("abc123", "abc124") is False

    def test_first_byte_mismatch(self):
        assert timing_safe_equal("xbc123", "abc123") is False

    @pytest.mark.parametrize(("a", "b"), [("abc", "abcd"), ("abcd", "abc"), ("", "a"), ("a", "")])
    def test_length_mismatch_is_false(self, a, b):
        assert timing_safe_equal(a, b) is False

    def test_empty_strings_are_equal(self):
        assert timing_safe_equal("", "") is True

    def test_non_ascii_does_not_raise(self):
        assert timing_safe_equal("é", "é") is True
        assert timing_safe_equal("é", "e") is False

    def test_lone_surrogate_does_not_raise(self):
        assert timing_safe_equal("\ud800", "x") is False

    def test_mismatch_position_does_not_affect_timing(self):
        """Median runtimes for early and late mismatches stay within noise."""
        size = 1 << 16
        base = b"a" * size
        early = b"b" + b"a" * (size - 1)
        late = b"a" * (size - 1) + b"b"

        def _sample(other: bytes) -> float:
            runs = []
            for _ in range(200):
                start = time.perf_counter_ns()
                timing_safe_equal(base, other)
                runs.append(time.perf_counter_ns() - start)
            return statistics.median(runs)

        _sample(early)  # warm-up
        early_ns = _sample(early)
        late_ns = _sample(late)
        # A short-circuiting compare would make early_ns a tiny fraction of late_ns.
        assert early_ns > late_ns * 0.5
        assert late_ns > early_ns * 0.5
