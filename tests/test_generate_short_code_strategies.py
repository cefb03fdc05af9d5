"""
Tests for short code generation strategies.
"""
import pytest

from linksly_app.services.short_code_strategies import (
    UrlSafeShortCodeStrategy,
    Base62ShortCodeStrategy
)
from linksly_app.services.short_code_factory import (
    ShortCodeFactory,
    ShortCodeStrategyType
)


class TestUrlSafeStrategy:
    """Test URL-safe random strategy"""

    @pytest.mark.parametrize("length", [6, 7, 8, 9])
    def test_generates_correct_length(self, length):
        code = UrlSafeShortCodeStrategy(length=length).generate()

        assert len(code) == length
        assert all(c in UrlSafeShortCodeStrategy.ALPHABET for c in code)

    def test_codes_differ(self):
        """Test that consecutive codes are not repeated"""
        strategy = UrlSafeShortCodeStrategy(length=8)

        codes = {strategy.generate() for _ in range(1000)}

        assert len(codes) == 1000


class TestBase62Strategy:
    """Test Base62 encoding strategy"""

    def test_generates_correct_length(self):
        """Short encodings are padded up to the configured length"""
        strategy = Base62ShortCodeStrategy(length=8)

        for _ in range(200):
            code = strategy.generate()
            assert len(code) == 8
            assert code.isalnum()

    def test_encode_known_values(self):
        strategy = Base62ShortCodeStrategy()

        assert strategy._base62_encode(0) == "0"
        assert strategy._base62_encode(61) == "Z"
        assert strategy._base62_encode(62) == "10"
        assert strategy._base62_encode(62 ** 2 + 1) == "101"

    def test_padding(self, monkeypatch):
        strategy = Base62ShortCodeStrategy(length=5)
        monkeypatch.setattr(
            "linksly_app.services.short_code_strategies.secrets.randbelow",
            lambda upper: 62,
        )

        assert strategy.generate() == "00010"


class TestShortCodeFactory:
    """Test strategy factory"""

    def test_creates_urlsafe_strategy(self):
        strategy = ShortCodeFactory.create_strategy(ShortCodeStrategyType.URLSAFE)
        assert isinstance(strategy, UrlSafeShortCodeStrategy)

    def test_creates_base62_strategy(self):
        strategy = ShortCodeFactory.create_strategy(ShortCodeStrategyType.BASE62)
        assert isinstance(strategy, Base62ShortCodeStrategy)

    def test_creates_default_from_settings(self):
        """Test factory uses settings when no type specified"""
        strategy = ShortCodeFactory.create_strategy()
        # urlsafe by default
        assert isinstance(strategy, UrlSafeShortCodeStrategy)

    def test_instances_are_cached(self):
        first = ShortCodeFactory.create_strategy(ShortCodeStrategyType.BASE62)
        second = ShortCodeFactory.create_strategy(ShortCodeStrategyType.BASE62)
        assert first is second

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            ShortCodeStrategyType("sequential")
