import os
import shutil
import tempfile
import unittest
from unittest import mock

import requests

from utils import get_keyword, load_noise_words, read_doc_list, document_tokens, extract_text, is_valid_url


class TestGetKeyword(unittest.TestCase):
    def test_trailing_punctuation_is_stripped(self):
        self.assertEqual(get_keyword("Coming.", set()), "coming")
        self.assertEqual(get_keyword("farts,", set()), "farts")
        self.assertEqual(get_keyword("what?!", set()), "what")

    def test_uppercase_is_lowered(self):
        self.assertEqual(get_keyword("HELLO", set()), "hello")

    def test_leading_non_letter_rejects(self):
        self.assertIsNone(get_keyword(".hello", set()))
        self.assertIsNone(get_keyword("1st", set()))

    def test_letter_after_non_letter_rejects(self):
        self.assertIsNone(get_keyword("ab?cd", set()))
        self.assertIsNone(get_keyword("don't", set()))
        self.assertIsNone(get_keyword("well-known.", set()))

    def test_empty_token_rejects(self):
        self.assertIsNone(get_keyword("", set()))

    def test_noise_word_rejects_case_insensitively(self):
        noise_words = {"the", "and"}
        self.assertIsNone(get_keyword("The", noise_words))
        self.assertIsNone(get_keyword("AND,", noise_words))
        self.assertEqual(get_keyword("Theme", noise_words), "theme")

    def test_non_ascii_letters_are_not_letters(self):
        self.assertIsNone(get_keyword("élan", set()))
        self.assertEqual(get_keyword("cafe’", set()), "cafe")


class TestInputFiles(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def write(self, name, content):
        path = os.path.join(self.tmp_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_noise_words_are_lowercased(self):
        path = self.write("noise.txt", "The\nand  OR\n\n")
        self.assertEqual(load_noise_words(path), {"the", "and", "or"})

    def test_doc_list_keeps_order(self):
        path = self.write("docs.txt", "b.txt\na.txt\n c.txt\n")
        self.assertEqual(read_doc_list(path), ["b.txt", "a.txt", "c.txt"])

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            load_noise_words(os.path.join(self.tmp_dir, "missing.txt"))

    def test_text_document_tokens(self):
        path = self.write("doc.txt", "It was coming.\n  Slowly,\tslowly\n")
        self.assertEqual(list(document_tokens(path)), ["It", "was", "coming.", "Slowly,", "slowly"])

    def test_html_document_tokens(self):
        path = self.write("doc.html", "<html><head><style>p {}</style></head>"
                                      "<body><h1>Deep Sea</h1><p>The sea.</p></body></html>")
        self.assertEqual(list(document_tokens(path)), ["Deep", "Sea", "The", "sea."])

    def test_missing_document_raises_on_read(self):
        tokens = document_tokens(os.path.join(self.tmp_dir, "missing.txt"))
        with self.assertRaises(FileNotFoundError):
            next(tokens)


class TestUrlDocuments(unittest.TestCase):
    def test_is_valid_url(self):
        self.assertTrue(is_valid_url("https://example.com/page"))
        self.assertFalse(is_valid_url("docs/page.txt"))
        self.assertFalse(is_valid_url("ftp://example.com/page"))

    @mock.patch("utils.requests.get")
    def test_html_response_is_stripped(self, mock_get):
        mock_get.return_value = mock.Mock(
            text="<p>Hello <b>world</b></p><script>var x = 1</script>",
            headers={"Content-Type": "text/html; charset=utf-8"},
        )
        self.assertEqual(list(document_tokens("https://example.com")), ["Hello", "world"])
        mock_get.return_value.raise_for_status.assert_called_once()

    @mock.patch("utils.requests.get")
    def test_plain_response_is_split(self, mock_get):
        mock_get.return_value = mock.Mock(text="one two\nthree", headers={"Content-Type": "text/plain"})
        self.assertEqual(list(document_tokens("http://example.com/a.txt")), ["one", "two", "three"])

    @mock.patch("utils.requests.get")
    def test_failed_request_raises(self, mock_get):
        mock_get.return_value.raise_for_status.side_effect = requests.HTTPError("404")
        with self.assertRaises(requests.RequestException):
            list(document_tokens("https://example.com/missing"))

    def test_extract_text_drops_scripts(self):
        self.assertEqual(extract_text("<div>a<script>b</script> c</div>"), "a c")


if __name__ == "__main__":
    unittest.main()
