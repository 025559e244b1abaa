#!/usr/bin/env python3
import unittest

from chatit.nlu.keywords import MAX_KEYWORDS, STOP_WORDS, extract_keywords


class TestExtractKeywords(unittest.TestCase):
    def test_stop_words_and_short_tokens_are_dropped(self):
        self.assertEqual(
            extract_keywords("What is the refund policy for an order?"),
            ["what", "refund", "policy", "order"],
        )

    def test_punctuation_becomes_whitespace(self):
        self.assertEqual(extract_keywords("e-mail/phone support!!"), ["mail", "phone", "support"])

    def test_original_order_and_duplicates_are_kept(self):
        self.assertEqual(extract_keywords("refund refund policy"), ["refund", "refund", "policy"])

    def test_truncated_to_ten(self):
        text = " ".join(f"word{i}" for i in range(25))
        result = extract_keywords(text)
        self.assertEqual(len(result), MAX_KEYWORDS)
        self.assertEqual(result[0], "word0")
        self.assertEqual(result[-1], "word9")

    def test_invariants_hold_for_noisy_text(self):
        text = "I, you and THEY would have been at the big Shop; we CAN do it by 5pm? ok!"
        result = extract_keywords(text)
        self.assertLessEqual(len(result), MAX_KEYWORDS)
        for word in result:
            self.assertNotIn(word, STOP_WORDS)
            self.assertGreater(len(word), 2)
            self.assertEqual(word, word.lower())

    def test_empty_input(self):
        self.assertEqual(extract_keywords(""), [])
        self.assertEqual(extract_keywords(None), [])


if __name__ == "__main__":
    unittest.main()
