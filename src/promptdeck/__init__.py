"""promptdeck

Assemble LLM prompts from ordered, role-tagged content providers, send them
to a generation backend, and coerce the reply into a declared output shape.

    from promptdeck import Agent, system_provider
    from promptdeck.llm import TextGenerator

    agent = Agent("List three colors.", generator=TextGenerator.from_env())
    agent.add_provider(system_provider("Answer tersely."))
    results = await agent.execute()
"""

from .actions import log_params_action, reply_action
from .agent import Agent
from .helpers import join_with_newlines, wrap_in_json_block
from .output import coerce_output
from .providers import (
    current_time_provider,
    output_provider,
    output_reminder,
    prompt_provider,
    prompt_suffix_provider,
    system_provider,
    system_suffix_provider,
)
from .registry import Registry
from .types import (
    ORDER_FIRST,
    ORDER_LAST,
    Action,
    AgentSettings,
    FieldDescriptor,
    Provider,
)

__all__ = [
    "Action",
    "Agent",
    "AgentSettings",
    "FieldDescriptor",
    "ORDER_FIRST",
    "ORDER_LAST",
    "Provider",
    "Registry",
    "coerce_output",
    "current_time_provider",
    "join_with_newlines",
    "log_params_action",
    "output_provider",
    "output_reminder",
    "prompt_provider",
    "prompt_suffix_provider",
    "reply_action",
    "system_provider",
    "system_suffix_provider",
    "wrap_in_json_block",
]
