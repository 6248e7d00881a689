"""Tests for the random source and logging helpers."""

import logging

import pytest

from utils import RandomSource, setup_logging


class TestRandomSource:
    def test_uniform_stays_in_range(self):
        rng = RandomSource(1)
        values = [rng.uniform(0.0, 1.0) for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)
        assert all(isinstance(v, float) for v in values)

    def test_uniform_int_stays_in_range(self):
        rng = RandomSource(2)
        values = {rng.uniform_int(0, 5) for _ in range(500)}
        assert values == {0, 1, 2, 3, 4}

    def test_same_seed_same_stream(self):
        a, b = RandomSource(42), RandomSource(42)
        assert [a.uniform(0, 1) for _ in range(5)] == [b.uniform(0, 1) for _ in range(5)]

    def test_reseed_restarts_stream(self):
        rng = RandomSource(3)
        first = [rng.uniform_int(0, 100) for _ in range(5)]
        rng.reseed(3)
        assert [rng.uniform_int(0, 100) for _ in range(5)] == first
        assert rng.seed == 3


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_setup_logging_accepts_level_name(restore_root_level):
    logger = setup_logging("debug")
    assert logger.name == "game"
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_defaults_to_config(restore_root_level):
    setup_logging()
    assert logging.getLogger().level == logging.WARNING
