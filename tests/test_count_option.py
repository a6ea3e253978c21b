import io
import unittest

from textfreq import CountOption, count


class TestCountOption(unittest.TestCase):
    def test_members(self):
        self.assertEqual([o.name for o in CountOption], ["CHAR", "WORD", "LINE"])

    def test_default(self):
        self.assertIs(CountOption.default(), CountOption.WORD)

    def test_parse_member(self):
        for option in CountOption:
            self.assertIs(CountOption.parse(option), option)

    def test_parse_names(self):
        self.assertIs(CountOption.parse("char"), CountOption.CHAR)
        self.assertIs(CountOption.parse("chars"), CountOption.CHAR)
        self.assertIs(CountOption.parse("Words"), CountOption.WORD)
        self.assertIs(CountOption.parse(" LINES "), CountOption.LINE)

    def test_parse_unknown(self):
        for value in ("bytes", "", "s", 3, None):
            with self.assertRaises(ValueError):
                CountOption.parse(value)

    def test_count_with_mode_name(self):
        freqs = count(io.BytesIO(b"aa\nbb\naa"), "lines")
        self.assertEqual(freqs, {"aa": 2, "bb": 1})

    def test_count_with_unknown_mode(self):
        with self.assertRaises(ValueError):
            count(io.BytesIO(b"aa"), "paragraphs")


if __name__ == "__main__":
    unittest.main()
