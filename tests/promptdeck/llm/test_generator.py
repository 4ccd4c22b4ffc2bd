import pytest

from promptdeck.llm import (
    MODEL_PROVIDERS,
    EmptyResponseError,
    LLMError,
    TextGenerator,
    UnsupportedModelError,
    build_client,
)
from promptdeck.llm import generator as generator_mod


@pytest.mark.asyncio
async def test_routes_model_to_backend(fake_client):
    google, openai = fake_client("g"), fake_client("o")
    gen = TextGenerator({"google": google, "openai": openai})

    assert await gen.generate("p", "gemini-2.0-flash", "sys") == "g"
    assert await gen.generate("p", "gpt-4o", "") == "o"
    assert google.calls == [
        {"prompt": "p", "model": "gemini-2.0-flash", "system_instruction": "sys"}
    ]
    assert openai.calls[0]["model"] == "gpt-4o"


@pytest.mark.asyncio
async def test_unknown_model_is_unsupported(fake_client):
    gen = TextGenerator({"google": fake_client()})
    with pytest.raises(UnsupportedModelError) as exc:
        await gen.generate("p", "no-such-model")
    assert exc.value.model == "no-such-model"


@pytest.mark.asyncio
async def test_known_model_without_client_is_unsupported(fake_client):
    gen = TextGenerator({"google": fake_client()})
    with pytest.raises(UnsupportedModelError):
        await gen.generate("p", "gpt-4o")


@pytest.mark.asyncio
async def test_register_model(fake_client):
    gen = TextGenerator({"openai": fake_client("x")}).register_model("my-ft", "openai")
    assert gen.backend_for("my-ft") == "openai"
    assert await gen.generate("p", "my-ft") == "x"
    assert "my-ft" not in MODEL_PROVIDERS


@pytest.mark.asyncio
async def test_empty_response_raises(fake_client):
    gen = TextGenerator({"google": fake_client("")})
    with pytest.raises(EmptyResponseError):
        await gen.generate("p", "gemini-2.0-flash")


@pytest.mark.asyncio
async def test_backend_errors_propagate(fake_client):
    gen = TextGenerator({"google": fake_client(error=ValueError("bad"))})
    with pytest.raises(ValueError, match="bad"):
        await gen.generate("p", "gemini-2.0-flash")


def test_from_env_only_builds_configured_backends(monkeypatch):
    built = []
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setattr(
        generator_mod, "build_client", lambda name: built.append(name) or object()
    )

    gen = TextGenerator.from_env()

    assert built == ["openai"]
    assert gen.backend_for("gpt-4o") == "openai"
    with pytest.raises(UnsupportedModelError):
        gen.backend_for("gemini-2.0-flash")


def test_build_client_unknown_provider():
    with pytest.raises(LLMError, match="Unknown LLM provider"):
        build_client("acme")


@pytest.mark.parametrize("provider,env", [("openai", "OPENAI_API_KEY"), ("google", "GEMINI_API_KEY")])
def test_build_client_requires_credentials(monkeypatch, provider, env):
    monkeypatch.delenv(env, raising=False)
    with pytest.raises(LLMError, match=env):
        build_client(provider)
