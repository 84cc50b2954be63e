"""Tests for constrained random string generation."""
from __future__ import annotations

import random
import string
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import pytest

from tmplfuncs.core.exceptions import InvalidArgumentError
from tmplfuncs.core.functions.randomness import Alphabet, RandomStringGenerator, build_source


def _chi_square(sample: str, alphabet: str) -> float:
    counts = Counter(sample)
    expected = len(sample) / len(alphabet)
    return sum((counts.get(ch, 0) - expected) ** 2 / expected for ch in alphabet)


class TestAlphabet:
    def test_domains(self) -> None:
        assert Alphabet.ALPHA.characters == string.ascii_letters
        assert Alphabet.ALPHANUMERIC.characters == string.ascii_letters + string.digits
        assert Alphabet.NUMERIC.characters == string.digits

    def test_ascii_covers_printable_range(self) -> None:
        """Space through tilde, symbols included."""
        chars = Alphabet.ASCII.characters
        assert len(chars) == 95
        assert chars[0] == " " and chars[-1] == "~"
        assert set(string.punctuation) <= set(chars)

    def test_domains_have_no_duplicates(self) -> None:
        for alphabet in Alphabet:
            assert len(set(alphabet.characters)) == len(alphabet.characters)


class TestGenerate:
    @pytest.mark.parametrize("length", [0, 1, 7, 64])
    def test_length_and_membership(self, length: int) -> None:
        gen = RandomStringGenerator(random.Random(7))
        for alphabet in Alphabet:
            out = gen.generate(alphabet, length)
            assert len(out) == length
            assert set(out) <= set(alphabet.characters)

    def test_zero_length_is_empty_string(self) -> None:
        assert RandomStringGenerator().alpha(0) == ""

    def test_negative_length_fails(self) -> None:
        with pytest.raises(InvalidArgumentError) as excinfo:
            RandomStringGenerator().alpha(-1)
        assert excinfo.value.context["argument"] == "length"
        assert isinstance(excinfo.value, ValueError)

    @pytest.mark.parametrize("length", [2.5, "3", None, True])
    def test_non_integer_length_fails(self, length) -> None:
        with pytest.raises(InvalidArgumentError):
            RandomStringGenerator().numeric(length)

    def test_wrappers_select_alphabet(self) -> None:
        gen = RandomStringGenerator(random.Random(3))
        assert set(gen.alpha(200)) <= set(string.ascii_letters)
        assert set(gen.alphanumeric(200)) <= set(string.ascii_letters + string.digits)
        assert gen.numeric(200).isdigit()
        assert all(32 <= ord(ch) < 127 for ch in gen.ascii(200))

    def test_injected_source_is_reproducible(self) -> None:
        """Same seed, same output."""
        first = RandomStringGenerator(random.Random(1234)).alphanumeric(32)
        second = RandomStringGenerator(random.Random(1234)).alphanumeric(32)
        assert first == second

    def test_default_source_is_not_fixed(self) -> None:
        """Unseeded generators do not repeat each other."""
        assert RandomStringGenerator().alphanumeric(40) != RandomStringGenerator().alphanumeric(40)
        gen = RandomStringGenerator()
        assert gen.alphanumeric(40) != gen.alphanumeric(40)

    def test_build_source(self) -> None:
        assert isinstance(build_source("system"), random.SystemRandom)
        assert type(build_source("pseudo")) is random.Random

    def test_concurrent_use_of_shared_generator(self) -> None:
        gen = RandomStringGenerator()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(gen.alphanumeric, [16] * 200))
        assert all(len(r) == 16 for r in results)
        assert len(set(results)) == len(results)


class TestUniformity:
    """Character frequencies must be uniform (no modulo bias)."""

    def test_numeric_chi_square(self) -> None:
        gen = RandomStringGenerator(random.Random(20240101))
        sample = gen.numeric(50_000)
        # df = 9, p = 0.0001
        assert _chi_square(sample, string.digits) < 34.2

    def test_alphanumeric_chi_square(self) -> None:
        """62 symbols do not divide any power of two evenly."""
        gen = RandomStringGenerator(random.Random(99))
        sample = gen.alphanumeric(124_000)
        # df = 61, p = 0.0001
        assert _chi_square(sample, Alphabet.ALPHANUMERIC.characters) < 111.0

    def test_ascii_chi_square_with_system_source(self) -> None:
        gen = RandomStringGenerator(build_source("system"))
        sample = gen.ascii(95_000)
        # df = 94, p < 0.0001
        assert _chi_square(sample, Alphabet.ASCII.characters) < 160.0
