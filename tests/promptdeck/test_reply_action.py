import logging

import pytest

from promptdeck import Agent, AgentSettings, system_provider
from promptdeck.llm import LLMError, TextGenerator

SHAPE = {"answer": {"kind": "number", "description": "The answer."}}


def _agent(client, **settings):
    return Agent(
        "What is six times seven?",
        AgentSettings(end_prompt_string="# OUTPUT", model="gemini-2.0-flash", **settings),
        generator=TextGenerator({"google": client}),
    )


@pytest.mark.asyncio
async def test_reply_returns_raw_text_without_shape(fake_client):
    client = fake_client("forty-two")
    agent = _agent(client)
    agent.add_provider(system_provider("Be brief."))

    results = await agent.execute()

    assert results == {"reply": "forty-two"}
    assert client.calls == [
        {
            "prompt": "What is six times seven?\n\n# OUTPUT",
            "model": "gemini-2.0-flash",
            "system_instruction": "Be brief.",
        }
    ]


@pytest.mark.asyncio
async def test_reply_coerces_when_shape_set(fake_client):
    client = fake_client('Here you go:\n```json\n{"answer": "42", "extra": 1}\n```')
    agent = _agent(client).set_output(SHAPE)

    results = await agent.execute()

    assert results["reply"] == {"answer": 42}
    sent = client.calls[0]
    assert "# Output Shape" in sent["system_instruction"]
    assert "# Output Reminder" in sent["prompt"]


@pytest.mark.asyncio
async def test_reply_falls_back_to_raw_text_on_coercion_error(fake_client, caplog):
    caplog.set_level(logging.ERROR, logger="promptdeck")
    client = fake_client("I cannot answer that.")
    agent = _agent(client).set_output(SHAPE)

    results = await agent.execute()

    assert results["reply"] == "I cannot answer that."
    assert "Error processing LLM output" in caplog.text


@pytest.mark.asyncio
async def test_reply_backend_failure_lands_in_error_slot(fake_client):
    agent = _agent(fake_client(error=RuntimeError("quota exceeded")))
    results = await agent.execute()
    assert results == {"reply": {"error": "Action failed: quota exceeded"}}


@pytest.mark.asyncio
async def test_reply_without_generator_is_an_error_result():
    agent = Agent("hi")
    results = await agent.execute()
    assert results["reply"]["error"].startswith("Action failed: No text generator")

    with pytest.raises(LLMError):
        await agent.generate("hi")


@pytest.mark.asyncio
async def test_log_params_action(caplog):
    from promptdeck import log_params_action

    caplog.set_level(logging.INFO, logger="promptdeck")
    agent = Agent("hi").toggle_action("reply", False).add_action(log_params_action)
    assert await agent.execute({"k": "v"}) == {"logParams": True}
    assert "{'k': 'v'}" in caplog.text
