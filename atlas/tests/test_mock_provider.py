from django.test import SimpleTestCase

from atlas.core.interfaces import Provider
from atlas.core.providers.mock import MockProvider
from atlas.types.requests import ProviderRequest


def _request(*messages, tools=None):
    return ProviderRequest.model_validate({"model": "mock", "messages": list(messages), "tools": tools})


PING = {"name": "ping", "parameters": {"type": "object", "properties": {}}}


class MockProviderTests(SimpleTestCase):
    def test_satisfies_provider_protocol(self):
        self.assertIsInstance(MockProvider(), Provider)

    async def test_echoes_last_user_message(self):
        chunks = await MockProvider().complete(_request({"role": "user", "content": "hello"}))
        self.assertEqual([c.type for c in chunks], ["text", "done"])
        self.assertEqual(chunks[0].text, 'This is a mock response to: "hello"')

    async def test_advertised_tool_name_triggers_call(self):
        chunks = await MockProvider().complete(_request({"role": "user", "content": "ping"}, tools=[PING]))
        self.assertEqual([c.type for c in chunks], ["tool_call", "done"])
        self.assertEqual(chunks[0].tool_call.name, "ping")
        self.assertEqual(chunks[0].tool_call.arguments, {})

    async def test_tool_name_not_advertised_is_echoed(self):
        chunks = await MockProvider().complete(_request({"role": "user", "content": "ping"}))
        self.assertEqual(chunks[0].type, "text")

    async def test_trigger_maps_to_several_calls(self):
        provider = MockProvider(tool_triggers={"both": ["a", "b"]})
        chunks = await provider.complete(_request({"role": "user", "content": "both"}))
        self.assertEqual([c.tool_call.name for c in chunks[:2]], ["a", "b"])
        self.assertNotEqual(chunks[0].tool_call.id, chunks[1].tool_call.id)

    async def test_acknowledges_trailing_tool_results(self):
        request = _request(
            {"role": "user", "content": "both"},
            {"role": "assistant", "tool_calls": [{"id": "c1", "name": "a"}, {"id": "c2", "name": "b"}]},
            {"role": "tool", "content": '"one"', "tool_call_id": "c1"},
            {"role": "tool", "content": '"two"', "tool_call_id": "c2"},
        )
        chunks = await MockProvider(tool_triggers={"both": ["a", "b"]}).complete(request)
        self.assertEqual(chunks[0].text, 'The tool execution was successful: "one", "two"')

    async def test_stream_spells_out_text_then_done(self):
        chunks = [c async for c in MockProvider().stream(_request({"role": "user", "content": "yo"}))]
        self.assertEqual(chunks[-1].type, "done")
        self.assertEqual("".join(c.text for c in chunks[:-1]), 'This is a mock response to: "yo"')

    async def test_stream_announces_then_emits_tool_calls(self):
        chunks = [
            c async for c in MockProvider().stream(_request({"role": "user", "content": "ping"}, tools=[PING]))
        ]
        types = [c.type for c in chunks]
        self.assertEqual(types[-2:], ["tool_call", "done"])
        self.assertEqual("".join(c.text for c in chunks if c.type == "text"), "Calling ping")
