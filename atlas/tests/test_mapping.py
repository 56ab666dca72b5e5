"""Tests for conversation_to_provider_request and provider_chunks_to_assistant_message."""

import json

from django.test import SimpleTestCase

from atlas.core.mapping import conversation_to_provider_request, provider_chunks_to_assistant_message
from atlas.types.agents import ToolDefinition
from atlas.types.messages import (
    Conversation,
    Message,
    TextContent,
    ToolCallContent,
    ToolResultContent,
)
from atlas.types.streaming import done_chunk, text_chunk, tool_call_chunk

from .utils import make_agent

LOOKUP = ToolDefinition.model_validate(
    {
        "name": "lookup",
        "description": "Look something up.",
        "parameters": {
            "type": "object",
            "properties": {"q": {"type": "string"}},
            "required": ["q"],
        },
    }
)


class ConversationToProviderRequestTests(SimpleTestCase):
    def test_text_messages_keep_role_and_order(self):
        conv = Conversation(messages=[Message.user("hi"), Message.assistant("hello"), Message.user("bye")])
        request = conversation_to_provider_request(conv, make_agent())
        self.assertEqual([m.role for m in request.messages], ["user", "assistant", "user"])
        self.assertEqual([m.content for m in request.messages], ["hi", "hello", "bye"])

    def test_multiple_text_items_are_newline_joined(self):
        msg = Message(role="user", content=[TextContent(text="a"), TextContent(text="b")])
        request = conversation_to_provider_request(Conversation(messages=[msg]), make_agent())
        self.assertEqual(len(request.messages), 1)
        self.assertEqual(request.messages[0].content, "a\nb")

    def test_tool_call_only_message_emits_no_text_message(self):
        msg = Message(
            role="assistant",
            content=[
                ToolCallContent(tool_call_id="c1", name="lookup", arguments={"q": "x"}),
                ToolCallContent(tool_call_id="c2", name="lookup", arguments={"q": "y"}),
            ],
        )
        request = conversation_to_provider_request(Conversation(messages=[msg]), make_agent())
        self.assertEqual(len(request.messages), 1)
        out = request.messages[0]
        self.assertEqual(out.role, "assistant")
        self.assertIsNone(out.content)
        self.assertEqual([tc.id for tc in out.tool_calls], ["c1", "c2"])
        self.assertEqual(out.tool_calls[1].arguments, {"q": "y"})

    def test_empty_text_is_not_emitted(self):
        msg = Message(role="assistant", content=[TextContent(text="")])
        request = conversation_to_provider_request(Conversation(messages=[msg]), make_agent())
        self.assertEqual(request.messages, [])

    def test_tool_results_emit_one_message_each_with_serialized_content(self):
        msg = Message(
            role="tool",
            content=[
                ToolResultContent(tool_call_id="c1", status="ok", result={"answer": 42}),
                ToolResultContent(tool_call_id="c2", status="error", result="boom"),
            ],
        )
        request = conversation_to_provider_request(Conversation(messages=[msg]), make_agent())
        self.assertEqual([m.role for m in request.messages], ["tool", "tool"])
        self.assertEqual([m.tool_call_id for m in request.messages], ["c1", "c2"])
        self.assertEqual(json.loads(request.messages[0].content), {"answer": 42})
        self.assertEqual(request.messages[1].content, '"boom"')

    def test_mixed_message_emits_text_then_calls_then_results(self):
        msg = Message(
            role="assistant",
            content=[
                ToolResultContent(tool_call_id="c0", status="ok", result=1),
                ToolCallContent(tool_call_id="c1", name="lookup"),
                TextContent(text="thinking"),
            ],
        )
        request = conversation_to_provider_request(Conversation(messages=[msg]), make_agent())
        self.assertEqual(
            [(m.role, m.content is None, m.tool_call_id) for m in request.messages],
            [("assistant", False, None), ("assistant", True, None), ("tool", False, "c0")],
        )

    def test_agent_options_are_carried_through(self):
        agent = make_agent(tools=[LOOKUP], temperature=0.2, max_tokens=128, metadata={"team": "x"})
        conv = Conversation(id="conv-9", messages=[Message.user("hi")])
        request = conversation_to_provider_request(conv, agent)
        self.assertEqual(request.model, "test-model")
        self.assertEqual(request.temperature, 0.2)
        self.assertEqual(request.max_tokens, 128)
        self.assertEqual([t.name for t in request.tools], ["lookup"])
        self.assertEqual(request.tools[0].parameters.required, ["q"])
        self.assertEqual(
            request.metadata, {"team": "x", "agent_id": "test-agent", "conversation_id": "conv-9"}
        )
        self.assertIsNone(request.tool_choice)

    def test_tool_schema_keywords_survive_into_request(self):
        tagger = ToolDefinition.model_validate(
            {
                "name": "tag",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "tags": {"type": "array", "items": {"type": "string"}},
                        "level": {"type": "integer", "enum": [1, 2, 3]},
                    },
                },
            }
        )
        request = conversation_to_provider_request(
            Conversation(messages=[Message.user("hi")]), make_agent(tools=[tagger])
        )
        properties = request.tools[0].parameters.model_dump(exclude_none=True)["properties"]
        self.assertEqual(properties["tags"]["items"], {"type": "string"})
        self.assertEqual(properties["level"]["enum"], [1, 2, 3])

    def test_tools_omitted_when_agent_declares_none(self):
        request = conversation_to_provider_request(Conversation(messages=[Message.user("hi")]), make_agent())
        self.assertIsNone(request.tools)

    def test_system_prompt_is_prepended(self):
        agent = make_agent(system_prompt="Be brief.")
        request = conversation_to_provider_request(Conversation(messages=[Message.user("hi")]), agent)
        self.assertEqual(request.messages[0].role, "system")
        self.assertEqual(request.messages[0].content, "Be brief.")
        self.assertEqual(request.messages[1].content, "hi")

    def test_system_prompt_not_added_when_conversation_has_one(self):
        agent = make_agent(system_prompt="Be brief.")
        conv = Conversation(messages=[Message.system("Custom."), Message.user("hi")])
        request = conversation_to_provider_request(conv, agent)
        self.assertEqual([m.content for m in request.messages], ["Custom.", "hi"])

    def test_input_conversation_is_not_mutated(self):
        conv = Conversation(messages=[Message.user("hi")])
        before = conv.model_dump()
        conversation_to_provider_request(conv, make_agent(system_prompt="x"))
        self.assertEqual(conv.model_dump(), before)


class ProviderChunksToAssistantMessageTests(SimpleTestCase):
    def test_concatenates_text_in_order_and_ignores_other_chunks(self):
        chunks = [
            text_chunk("Hel"),
            tool_call_chunk("c1", "lookup"),
            text_chunk("lo"),
            done_chunk(),
        ]
        msg = provider_chunks_to_assistant_message(chunks)
        self.assertEqual(msg.role, "assistant")
        self.assertEqual(len(msg.content), 1)
        self.assertEqual(msg.content[0].text, "Hello")

    def test_produces_fresh_ids(self):
        a = provider_chunks_to_assistant_message([text_chunk("x")])
        b = provider_chunks_to_assistant_message([text_chunk("x")])
        self.assertNotEqual(a.id, b.id)
        self.assertTrue(a.id.startswith("asst_"))

    def test_no_text_yields_empty_text_item(self):
        msg = provider_chunks_to_assistant_message([done_chunk()])
        self.assertEqual(msg.content[0].text, "")
