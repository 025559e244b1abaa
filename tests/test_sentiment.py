#!/usr/bin/env python3
import unittest
from types import SimpleNamespace

from chatit.nlu.sentiment import summarize_sentiment, tag
from chatit.schemas.io_models import SentimentLabel


class TestTag(unittest.TestCase):
    def test_positive(self):
        result = tag("this is great, thanks!")
        self.assertEqual(result.sentiment, SentimentLabel.positive)
        self.assertEqual(result.score, 0.7)

    def test_negative(self):
        result = tag("terrible, broken, awful")
        self.assertEqual(result.sentiment, SentimentLabel.negative)
        self.assertEqual(result.score, -0.7)

    def test_both_lists_is_neutral(self):
        result = tag("good but broken")
        self.assertEqual(result.sentiment, SentimentLabel.neutral)
        self.assertEqual(result.score, 0)

    def test_neither_list_is_neutral(self):
        result = tag("where is my parcel")
        self.assertEqual(result.sentiment, SentimentLabel.neutral)
        self.assertEqual(result.score, 0)

    def test_containment_ignores_word_boundaries(self):
        # "badge" contains "bad"
        self.assertEqual(tag("I lost my badge").sentiment, SentimentLabel.negative)

    def test_case_insensitive(self):
        self.assertEqual(tag("AWESOME").sentiment, SentimentLabel.positive)


class TestSummarizeSentiment(unittest.TestCase):
    def test_empty(self):
        summary = summarize_sentiment([])
        self.assertEqual(summary.total, 0)
        self.assertEqual(summary.overall_sentiment, 0)

    def test_percentages_and_overall(self):
        records = [
            SimpleNamespace(sentiment="positive", score=0.7),
            SimpleNamespace(sentiment="positive", score=0.7),
            SimpleNamespace(sentiment="negative", score=-0.7),
            SimpleNamespace(sentiment="neutral", score=0.0),
        ]
        summary = summarize_sentiment(records)
        self.assertEqual(summary.total, 4)
        self.assertEqual(summary.positive_percentage, 50)
        self.assertEqual(summary.negative_percentage, 25)
        self.assertEqual(summary.neutral_percentage, 25)
        self.assertEqual(summary.overall_sentiment, 2)

    def test_halves_round_up(self):
        records = [SimpleNamespace(sentiment="positive", score=0.7)]
        records += [SimpleNamespace(sentiment="neutral", score=0.0) for _ in range(7)]
        summary = summarize_sentiment(records)
        self.assertEqual(summary.positive_percentage, 13)
        self.assertEqual(summary.neutral_percentage, 88)
        self.assertEqual(summary.overall_sentiment, 1)

    def test_negative_half_rounds_toward_zero(self):
        records = [
            SimpleNamespace(sentiment="negative", score=-0.7),
            SimpleNamespace(sentiment="neutral", score=0.0),
        ]
        summary = summarize_sentiment(records)
        self.assertEqual(summary.negative_percentage, 50)
        self.assertEqual(summary.overall_sentiment, -3)


if __name__ == "__main__":
    unittest.main()
