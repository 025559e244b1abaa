#!/usr/bin/env python3
import unittest

from chatit.agents.base_agent import BaseAgent
from chatit.agents.general_agent import GeneralAgent
from chatit.agents.greeting_agent import GreetingAgent
from chatit.agents.help_agent import HelpAgent
from chatit.agents.question_agent import QuestionAgent
from support import make_bot, make_doc

REFUND_DOC = (
    "# Refund Policy\n"
    "Our refund policy is 30 days from delivery. "
    "Refunds go back to the original payment method. "
    "Support can help with exchanges for damaged items."
)
SHIPPING_DOC = (
    "Shipping is free above fifty dollars. "
    "Orders usually arrive within five business days."
)


class TestRelevantContent(unittest.TestCase):
    def test_short_or_empty_documents_dropped_and_capped(self):
        docs = [
            make_doc(1, "too short"),
            make_doc(2, None),
            make_doc(3, REFUND_DOC),
            make_doc(4, SHIPPING_DOC),
            make_doc(5, REFUND_DOC),
            make_doc(6, SHIPPING_DOC),
        ]
        self.assertEqual([d.id for d in BaseAgent.relevant_content(docs)], [3, 4, 5])


class TestGreetingAgent(unittest.TestCase):
    def test_no_documents(self):
        reply = GreetingAgent().handle("hello", make_bot(name="Ava"), [])
        self.assertTrue(reply.text.startswith("Hello! I'm Ava. I'm here to help you!"))
        self.assertTrue(reply.text.endswith("What would you like to know?"))
        self.assertEqual(reply.confidence, 0.9)
        self.assertEqual(reply.sources, [])

    def test_description_and_topics(self):
        bot = make_bot(name="Ava", description="I answer store questions.")
        reply = GreetingAgent().handle("hi", bot, [make_doc(1, REFUND_DOC, name="refunds.md")])
        self.assertIn("Hello! I'm Ava. I answer store questions.", reply.text)
        self.assertIn("I can help you with topics like: Refund Policy,", reply.text)
        self.assertEqual(reply.sources, ["refunds.md"])

    def test_missing_name_uses_default(self):
        reply = GreetingAgent().handle("hi", make_bot(name=None), [])
        self.assertTrue(reply.text.startswith("Hello! I'm AI Assistant."))


class TestQuestionAgent(unittest.TestCase):
    def test_no_documents(self):
        reply = QuestionAgent().handle("what is the refund policy?", make_bot(), [])
        self.assertIn("don't have specific information", reply.text)
        self.assertEqual(reply.confidence, 0.3)
        self.assertEqual(reply.sources, [])

    def test_best_match_summary_with_url_and_related(self):
        docs = [
            make_doc(1, SHIPPING_DOC, name="shipping.md"),
            make_doc(2, REFUND_DOC, name="refunds.md", url="https://example.com/refunds"),
        ]
        reply = QuestionAgent().handle("what is the refund policy?", make_bot(), docs)
        self.assertTrue(reply.text.startswith("Based on my knowledge base, here's what I found:"))
        self.assertIn("30 days", reply.text)
        self.assertIn("For more details, you can check: https://example.com/refunds", reply.text)
        self.assertIn("You might also be interested in: shipping.md.", reply.text)
        self.assertEqual(reply.confidence, 0.8)
        self.assertEqual(reply.sources, ["refunds.md"])

    def test_source_falls_back_to_url_then_knowledge_base(self):
        reply = QuestionAgent().handle("refund?", make_bot(), [make_doc(1, REFUND_DOC, name="", url="https://x.io/r")])
        self.assertEqual(reply.sources, ["https://x.io/r"])
        reply = QuestionAgent().handle("refund?", make_bot(), [make_doc(1, REFUND_DOC, name="")])
        self.assertEqual(reply.sources, ["Knowledge base"])

    def test_zero_score_gives_soft_reply(self):
        docs = [make_doc(1, SHIPPING_DOC), make_doc(2, REFUND_DOC), make_doc(3, SHIPPING_DOC)]
        reply = QuestionAgent().handle("warranty?", make_bot(), docs)
        self.assertIn("not sure if it directly answers", reply.text)
        self.assertEqual(reply.confidence, 0.5)
        self.assertEqual(reply.sources, ["doc-1", "doc-2"])


class TestHelpAgent(unittest.TestCase):
    def test_numbered_capabilities(self):
        reply = HelpAgent().handle("support please", make_bot(name="Ava"), [make_doc(1, REFUND_DOC)])
        self.assertTrue(reply.text.startswith("I'm Ava and I'm here to help! Here are some things I can help you with:"))
        self.assertIn("1. Support can help with exchanges for damaged items", reply.text)
        self.assertEqual(reply.confidence, 0.9)

    def test_documents_without_capabilities(self):
        reply = HelpAgent().handle("guide me", make_bot(), [make_doc(1, SHIPPING_DOC)])
        self.assertIn("I have access to information about various topics", reply.text)

    def test_no_documents(self):
        reply = HelpAgent().handle("guide me", make_bot(), [])
        self.assertIn("ready to answer your questions", reply.text)
        self.assertTrue(reply.text.endswith("Feel free to ask me anything, and I'll do my best to help!"))
        self.assertEqual(reply.confidence, 0.9)


class TestGeneralAgent(unittest.TestCase):
    def test_no_documents(self):
        reply = GeneralAgent().handle("shipping", make_bot(), [])
        self.assertEqual(reply.confidence, 0.2)
        self.assertEqual(reply.sources, [])

    def test_uses_first_document_without_rescoring(self):
        docs = [make_doc(1, SHIPPING_DOC, name="shipping.md"), make_doc(2, REFUND_DOC, name="refunds.md")]
        reply = GeneralAgent().handle("refund policy", make_bot(), docs)
        self.assertTrue(reply.text.startswith("Here's some relevant information I found:"))
        self.assertIn("Shipping is free above fifty dollars", reply.text)
        self.assertIn("I also have information about related topics", reply.text)
        self.assertEqual(reply.confidence, 0.7)
        self.assertEqual(reply.sources, ["shipping.md"])


if __name__ == "__main__":
    unittest.main()
