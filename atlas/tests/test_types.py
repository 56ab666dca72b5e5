"""Tests for the pydantic data model: messages, content union, chunks, agents."""

from django.test import SimpleTestCase
from pydantic import ValidationError

from atlas.types.agents import AgentOptions, ToolDefinition, agent
from atlas.types.messages import (
    Conversation,
    Message,
    TextContent,
    ToolCallContent,
    ToolResultContent,
    new_id,
)
from atlas.types.streaming import ProviderResponseChunk, done_chunk, text_chunk, tool_call_chunk


class MessageTests(SimpleTestCase):
    def test_content_dicts_parse_into_tagged_variants(self):
        msg = Message.model_validate(
            {
                "role": "assistant",
                "content": [
                    {"type": "text", "text": "Looking it up"},
                    {"type": "tool_call", "tool_call_id": "c1", "name": "lookup", "arguments": {"q": 1}},
                    {"type": "tool_result", "tool_call_id": "c1", "status": "ok", "result": [1, 2]},
                ],
            }
        )
        self.assertIsInstance(msg.content[0], TextContent)
        self.assertIsInstance(msg.content[1], ToolCallContent)
        self.assertIsInstance(msg.content[2], ToolResultContent)

    def test_unknown_content_type_is_rejected(self):
        with self.assertRaises(ValidationError):
            Message.model_validate({"role": "user", "content": [{"type": "image", "url": "x"}]})

    def test_invalid_tool_status_is_rejected(self):
        with self.assertRaises(ValidationError):
            ToolResultContent(tool_call_id="c1", status="maybe", result=None)

    def test_defaults_fill_id_and_timestamp(self):
        a = Message.user("hi")
        b = Message.user("hi")
        self.assertNotEqual(a.id, b.id)
        self.assertTrue(a.id.startswith("msg_"))
        self.assertIsNotNone(a.created_at.tzinfo)
        self.assertEqual(a.metadata, {})

    def test_message_is_frozen(self):
        msg = Message.user("hi")
        with self.assertRaises(ValidationError):
            msg.role = "assistant"

    def test_text_property_joins_text_items_with_newlines(self):
        msg = Message(
            role="user",
            content=[
                TextContent(text="one"),
                ToolCallContent(tool_call_id="c", name="t"),
                TextContent(text="two"),
            ],
        )
        self.assertEqual(msg.text, "one\ntwo")
        self.assertEqual([c.name for c in msg.tool_calls], ["t"])
        self.assertEqual(msg.tool_results, [])


class ConversationTests(SimpleTestCase):
    def test_extended_returns_copy_and_leaves_original(self):
        conv = Conversation(id="c", messages=[Message.user("a")])
        grown = conv.extended(Message.user("b"))
        self.assertEqual(len(conv.messages), 1)
        self.assertEqual(len(grown.messages), 2)
        self.assertEqual(grown.id, "c")
        grown.messages.append(Message.user("c"))
        self.assertEqual(len(conv.messages), 1)

    def test_new_id_uses_prefix(self):
        self.assertTrue(new_id("req").startswith("req_"))


class ProviderResponseChunkTests(SimpleTestCase):
    def test_helpers_build_each_kind(self):
        self.assertEqual(text_chunk("x").text, "x")
        call = tool_call_chunk("c1", "lookup", {"q": "a"})
        self.assertEqual(call.tool_call.name, "lookup")
        self.assertEqual(call.tool_call.arguments, {"q": "a"})
        self.assertEqual(done_chunk().type, "done")

    def test_tool_call_chunk_defaults_arguments_to_empty_dict(self):
        self.assertEqual(tool_call_chunk("c1", "lookup").tool_call.arguments, {})

    def test_text_chunk_requires_text(self):
        with self.assertRaises(ValidationError):
            ProviderResponseChunk(type="text")

    def test_tool_call_chunk_requires_payload(self):
        with self.assertRaises(ValidationError):
            ProviderResponseChunk(type="tool_call")

    def test_unknown_type_rejected(self):
        with self.assertRaises(ValidationError):
            ProviderResponseChunk(type="error")


class AgentTests(SimpleTestCase):
    def test_agent_factory_accepts_dict(self):
        a = agent(
            {
                "id": "helper",
                "provider": "mock-provider",
                "model": "m",
                "tools": [{"name": "lookup", "parameters": {"type": "object", "properties": {}}}],
            }
        )
        self.assertEqual(a.id, "helper")
        self.assertEqual(a.options.tool_names, ["lookup"])

    def test_agent_factory_uses_options_id(self):
        opts = AgentOptions(id="x", provider="p", model="m")
        self.assertEqual(agent(opts).id, "x")
        self.assertIs(agent(opts).options, opts)

    def test_tool_definition_rejects_unknown_property_type(self):
        with self.assertRaises(ValidationError):
            ToolDefinition.model_validate(
                {"name": "t", "parameters": {"type": "object", "properties": {"a": {"type": "date"}}}}
            )
