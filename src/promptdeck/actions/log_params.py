from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from promptdeck import logger as logger_mod

from ..types import Action

if TYPE_CHECKING:
    from ..agent import Agent

log = logger_mod.get_logger()


async def log_params(agent: "Agent", params: Optional[Any] = None) -> bool:
    log.info(f"Agent parameters: {params}")
    return True


log_params_action = Action(key="logParams", title="Log Parameters", operation=log_params)
