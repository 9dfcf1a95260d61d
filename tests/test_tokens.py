"""
Tests for the token model, keyword decision table, source locations and
scan configuration.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxscan.lexer.tokens import (
    AMBIGUOUS_PREFIXES, KEYWORD_CANDIDATES, Keyword, Kind, SourceIndex, SourceLocation, Token,
    build_candidate_table, char_at, locate, utf8_width
)
from loxscan.lexer.config import CommentStyle, ScanConfig


class TestToken(unittest.TestCase):

    def test_token_is_immutable(self):
        token = Token(3, Kind.NUMBER)
        with self.assertRaises(AttributeError):
            token.position = 4

    def test_token_equality_and_str(self):
        self.assertEqual(Token(0, Keyword.AND), Token(0, Keyword.AND))
        self.assertNotEqual(Token(0, Keyword.AND), Token(0, Keyword.OR))
        self.assertEqual(str(Token(5, Kind.LEFT_PAREN)), "LEFT_PAREN@5")
        self.assertEqual(str(Token(0, Keyword.FUNCTION)), "FUNCTION@0")

    def test_tag_and_keyword_payload(self):
        plain = Token(0, Kind.IDENTIFIER)
        self.assertEqual(plain.tag, Kind.IDENTIFIER)
        self.assertIsNone(plain.keyword)
        self.assertFalse(plain.is_keyword)

        keyword = Token(0, Keyword.NIL)
        self.assertEqual(keyword.tag, Kind.KEYWORD)
        self.assertEqual(keyword.keyword, Keyword.NIL)

    def test_literal_and_error_flags(self):
        self.assertTrue(Token(0, Kind.STRING).is_literal)
        self.assertTrue(Token(0, Kind.NUMBER).is_literal)
        self.assertFalse(Token(0, Kind.IDENTIFIER).is_literal)
        self.assertTrue(Token(0, Kind.ERROR).is_error)

    def test_keyword_spelling(self):
        self.assertEqual(str(Keyword.SUPER), "super")
        self.assertEqual(len(Keyword), 16)


class TestKeywordCandidates(unittest.TestCase):

    def test_unique_first_letters_use_one_character(self):
        self.assertEqual(KEYWORD_CANDIDATES["a"], Keyword.AND)
        self.assertEqual(KEYWORD_CANDIDATES["w"], Keyword.WHILE)
        self.assertEqual(KEYWORD_CANDIDATES["r"], Keyword.RETURN)

    def test_shared_first_letters_use_two_characters(self):
        self.assertEqual(KEYWORD_CANDIDATES["th"], Keyword.THIS)
        self.assertEqual(KEYWORD_CANDIDATES["tr"], Keyword.TRUE)
        self.assertEqual(KEYWORD_CANDIDATES["fa"], Keyword.FALSE)
        self.assertEqual(KEYWORD_CANDIDATES["fo"], Keyword.FOR)
        self.assertEqual(KEYWORD_CANDIDATES["fu"], Keyword.FUNCTION)
        self.assertNotIn("t", KEYWORD_CANDIDATES)
        self.assertNotIn("f", KEYWORD_CANDIDATES)

    def test_every_keyword_has_a_candidate(self):
        self.assertEqual(set(KEYWORD_CANDIDATES.values()), set(Keyword))
        for prefix, keyword in KEYWORD_CANDIDATES.items():
            self.assertTrue(keyword.value.startswith(prefix))

    def test_ambiguous_prefixes(self):
        self.assertEqual(AMBIGUOUS_PREFIXES, frozenset({"t", "f"}))

    def test_keyword_prefix_of_another_is_rejected(self):
        from enum import Enum

        class Clashing(Enum):
            FOR = "for"
            FORALL = "forall"

        with self.assertRaises(ValueError):
            build_candidate_table(Clashing)


class TestSourceLocation(unittest.TestCase):

    def test_utf8_width(self):
        self.assertEqual(utf8_width("a"), 1)
        self.assertEqual(utf8_width("é"), 2)
        self.assertEqual(utf8_width("日"), 3)
        self.assertEqual(utf8_width("😀"), 4)

    def test_locate_lines_and_columns(self):
        source = "var a;\n  print a;"
        self.assertEqual(locate(source, 0, "t.lox"), SourceLocation("t.lox", 1, 1, 0))
        self.assertEqual(locate(source, 4), SourceLocation("<string>", 1, 5, 4))
        self.assertEqual(locate(source, 9), SourceLocation("<string>", 2, 3, 9))

    def test_locate_counts_characters_in_columns(self):
        source = "é x"
        self.assertEqual(locate(source, 3).column, 3)

    def test_locate_end_of_source(self):
        self.assertEqual(locate("ab", 2).column, 3)

    def test_locate_rejects_bad_offsets(self):
        with self.assertRaises(ValueError):
            locate("ab", 3)
        with self.assertRaises(ValueError):
            locate("é", 1)
        with self.assertRaises(ValueError):
            locate("ab", -1)

    def test_char_at(self):
        self.assertEqual(char_at("a日b", 0), "a")
        self.assertEqual(char_at("a日b", 1), "日")
        self.assertEqual(char_at("a日b", 4), "b")
        with self.assertRaises(ValueError):
            char_at("a日b", 2)
        with self.assertRaises(ValueError):
            char_at("ab", 2)

    def test_source_index_matches_one_off_lookups(self):
        source = "a\u00e9\n\u65e5 b\n\nz"
        index = SourceIndex(source)
        self.assertEqual(index.size, len(source.encode("utf-8")))
        offset = 0
        for char in source:
            self.assertEqual(index.char_at(offset), char)
            self.assertEqual(index.locate(offset, "x.lox"), locate(source, offset, "x.lox"))
            offset += utf8_width(char)
        self.assertEqual(index.locate(index.size), SourceLocation("<string>", 4, 2, index.size))

    def test_source_index_rejects_bad_offsets(self):
        index = SourceIndex("a\u00e9")
        for offset in (-1, 2, 4):
            with self.assertRaises(ValueError):
                index.locate(offset)
        with self.assertRaises(ValueError):
            index.char_at(3)
        with self.assertRaises(ValueError):
            SourceIndex("").char_at(0)
        self.assertEqual(SourceIndex("").locate(0).line, 1)

    def test_location_str(self):
        self.assertEqual(str(SourceLocation("main.lox", 3, 7, 20)), "main.lox:3:7")


class TestScanConfig(unittest.TestCase):

    def test_default_dialect(self):
        self.assertEqual(ScanConfig().comment_style, CommentStyle.SLASH_SLASH)

    def test_config_is_frozen(self):
        config = ScanConfig()
        with self.assertRaises(AttributeError):
            config.comment_style = CommentStyle.HASH

    def test_from_dict_accepts_spelling(self):
        self.assertEqual(ScanConfig.from_dict({"comment_style": "#"}),
                         ScanConfig(comment_style=CommentStyle.HASH))
        self.assertEqual(ScanConfig.from_dict({"comment_style": CommentStyle.SLASH_SLASH}),
                         ScanConfig())
        self.assertEqual(ScanConfig.from_dict({}), ScanConfig())

    def test_from_dict_rejects_unknown_values(self):
        with self.assertRaises(ValueError):
            ScanConfig.from_dict({"comment_style": ";"})
        with self.assertRaises(ValueError):
            ScanConfig.from_dict({"tabs": 4})


class TestVersion(unittest.TestCase):

    def test_package_reexports_version_module(self):
        import loxscan
        from loxscan import _version
        self.assertEqual(loxscan.__version__, _version.__version__)
        self.assertRegex(loxscan.__version__, r"^\d+\.\d+\.\d+")


if __name__ == "__main__":
    unittest.main(verbosity=2)
