import unittest

from portdash.utils.collation import collation_key, names_equal
from portdash.utils.symbols import (
    DEFAULT_SYMBOL,
    POPULAR_SYMBOLS,
    custom_symbol,
    filter_symbols,
    resolve_symbol,
)


class TestCollation(unittest.TestCase):
    def test_case_insensitive_equality(self):
        self.assertTrue(names_equal("Media", "media"))
        self.assertTrue(names_equal("STRASSE", "straße"))
        self.assertFalse(names_equal("Café", "Cafe"))

    def test_accented_names_sort_with_base_letter(self):
        names = ["Zebra", "Émile", "apple", "eagle"]
        self.assertEqual(sorted(names, key=collation_key), ["apple", "eagle", "Émile", "Zebra"])

    def test_case_does_not_change_key(self):
        self.assertEqual(collation_key("Plex"), collation_key("plex"))


class TestSymbols(unittest.TestCase):
    def test_resolve_falls_back_to_globe(self):
        self.assertEqual(resolve_symbol(None), DEFAULT_SYMBOL)
        self.assertEqual(resolve_symbol(""), DEFAULT_SYMBOL)
        self.assertEqual(resolve_symbol("server.rack"), DEFAULT_SYMBOL)
        self.assertEqual(resolve_symbol("Not An Icon"), DEFAULT_SYMBOL)
        self.assertEqual(resolve_symbol("server"), "server")
        self.assertEqual(DEFAULT_SYMBOL, "globe")

    def test_filter(self):
        self.assertEqual(filter_symbols(""), POPULAR_SYMBOLS)
        results = filter_symbols("BELL")
        self.assertEqual(results, ["bell", "bell-ring"])
        self.assertEqual(filter_symbols("no-such-icon"), [])

    def test_unknown_icon_names_fall_back_to_globe(self):
        self.assertEqual(resolve_symbol("no-such-icon"), DEFAULT_SYMBOL)
        self.assertEqual(resolve_symbol("Server"), DEFAULT_SYMBOL)
        self.assertIsNone(custom_symbol("zzz-not-an-icon"))

    def test_popular_symbols_are_all_drawable(self):
        for symbol in POPULAR_SYMBOLS:
            with self.subTest(symbol=symbol):
                self.assertEqual(resolve_symbol(symbol), symbol)

    def test_custom_symbol(self):
        self.assertEqual(custom_symbol("hard-drive"), "hard-drive")
        self.assertIsNone(custom_symbol("globe"))
        self.assertIsNone(custom_symbol(""))
        self.assertIsNone(custom_symbol("bad name"))


if __name__ == "__main__":
    unittest.main()
