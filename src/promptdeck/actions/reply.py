from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from promptdeck import config
from promptdeck import logger as logger_mod

from ..errors import OutputError
from ..output import coerce_output
from ..types import Action

if TYPE_CHECKING:
    from ..agent import Agent

log = logger_mod.get_logger()


async def reply(agent: "Agent", params: Optional[Any] = None) -> Any:
    """Generate a response for the agent's current state.

    Returns the coerced record when an output shape is set, else the raw
    text. Coercion failures fall back to the raw text.
    """

    scope = config.REPLY_ACTION_KEY
    system_instruction = await agent.system(scope)
    user_prompt = await agent.prompt(scope)
    raw = await agent.generate(user_prompt, system_instruction)

    if agent.output_shape is None:
        return raw
    try:
        return coerce_output(agent.output_shape, raw)
    except OutputError as e:
        log.error(f"Error processing LLM output in reply action: {e}")
        return raw


reply_action = Action(
    key=config.REPLY_ACTION_KEY, title="Reply to User", operation=reply
)
