#!/usr/bin/env python3
import unittest

from chatit.nlu.topics import extract_capabilities, extract_topics


class TestExtractTopics(unittest.TestCase):
    def test_headers_then_emphasis_then_sentences(self):
        content = (
            "# Billing\n"
            "## Refunds\n"
            "We offer **fast refunds** for every order. Contact us any time"
        )
        topics = extract_topics(content)
        self.assertEqual(topics[:3], ["Billing", "Refunds", "fast refunds"])
        self.assertLessEqual(len(topics), 5)

    def test_leading_sentences_filtered_by_length(self):
        content = "Short. This sentence is long enough to count. Another valid sentence here! Ignored fourth sentence."
        self.assertEqual(
            extract_topics(content),
            ["This sentence is long enough to count", "Another valid sentence here"],
        )

    def test_capped_at_five(self):
        content = "\n".join(f"# Header {i}" for i in range(8))
        self.assertEqual(len(extract_topics(content)), 5)

    def test_empty(self):
        self.assertEqual(extract_topics(""), [])


class TestExtractCapabilities(unittest.TestCase):
    def test_action_phrases_in_pattern_order(self):
        content = (
            "Learn how to configure the embed widget. "
            "Our team can reset your password quickly. "
            "We provide round the clock monitoring."
        )
        self.assertEqual(
            extract_capabilities(content),
            [
                "can reset your password quickly",
                "provide round the clock monitoring",
                "how to configure the embed widget",
            ],
        )

    def test_short_tails_are_ignored(self):
        self.assertEqual(extract_capabilities("We can help. Fine."), [])

    def test_capped_at_five(self):
        content = " ".join(f"We can do task number {i} for you." for i in range(9))
        self.assertEqual(len(extract_capabilities(content)), 5)


if __name__ == "__main__":
    unittest.main()
