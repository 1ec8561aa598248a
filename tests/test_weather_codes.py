# ABOUTME: Contract tests for the WMO weather code lexicon.
# ABOUTME: Validates known code text and the fallback for unmapped or missing codes.

import pytest

from src.weather_codes import FALLBACK_SYMBOL, WEATHER_CODES, lookup


class TestLookup:
    def test_clear_sky(self):
        """lookup(0) is the clear sky entry.

        Implementation: Looks up code 0.
        Passing implies: The fixed table is wired to the lookup function.
        """
        entry = lookup(0)
        assert entry.description == "Clear sky"
        assert entry.symbol == "☀️"

    @pytest.mark.parametrize("code", [4, 50, 100, 9999, -1])
    def test_unmapped_code_falls_back(self, code):
        """Unmapped codes get a generated description that embeds the code.

        Implementation: Looks up codes absent from the table.
        Passing implies: lookup never fails and never returns an empty description.
        """
        entry = lookup(code)
        assert entry.description == f"Weather code {code}"
        assert entry.symbol == FALLBACK_SYMBOL

    def test_missing_code_falls_back(self):
        """A missing weather code still yields a usable entry.

        Implementation: Looks up None.
        Passing implies: Short weathercode arrays do not break row enrichment.
        """
        entry = lookup(None)
        assert entry.description
        assert entry.symbol == FALLBACK_SYMBOL

    def test_every_table_entry_is_complete(self):
        """Every mapped code has non-empty text and symbol.

        Implementation: Iterates the static table.
        Passing implies: No half-filled rows in the lexicon.
        """
        assert len(WEATHER_CODES) == 28
        for code, entry in WEATHER_CODES.items():
            assert lookup(code) is entry
            assert entry.description
            assert entry.symbol

    def test_table_is_read_only(self):
        """The lexicon cannot be mutated at runtime.

        Implementation: Attempts item assignment on the table.
        Passing implies: The shared lexicon is safe to read from concurrent requests.
        """
        with pytest.raises(TypeError):
            WEATHER_CODES[0] = lookup(3)
