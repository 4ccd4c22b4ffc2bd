from __future__ import annotations

import asyncio
import dataclasses
import inspect
from typing import Any, Dict, Mapping, Optional

from promptdeck import config
from promptdeck import logger as logger_mod

from .actions import reply_action
from .errors import ActionExecutionError, ActionNotFoundError, ProviderExecutionError
from .helpers import format_provider_content, join_with_newlines
from .llm import LLMError, TextGenerator
from .providers import (
    OUTPUT_REMINDER_KEY,
    OUTPUT_SHAPE_KEY,
    output_provider,
    output_reminder,
    prompt_provider,
)
from .registry import Registry
from .shape import normalize_shape
from .types import Action, AgentSettings, FieldDescriptor, Provider, Role

log = logger_mod.get_logger()


class Agent:
    """Assembles prompts from providers and runs actions against the result.

    Providers and actions live in keyed registries. ``add_*`` refuses an
    existing key, ``set_*`` overwrites it. Rendering and execution always read
    the current registries; nothing is snapshotted.

        agent = Agent("Summarize the ticket.", generator=TextGenerator.from_env())
        agent.add_provider(system_provider("You are a support engineer."))
        agent.set_output({"summary": {"kind": "string", "description": "..."}})
        results = await agent.execute()
    """

    def __init__(
        self,
        prompt: str,
        settings: Optional[AgentSettings | Mapping[str, Any]] = None,
        *,
        generator: Optional[TextGenerator] = None,
    ) -> None:
        self.settings = self._merge_settings(settings)
        self.generator = generator
        self.output_shape: Optional[Dict[str, FieldDescriptor]] = None
        self._providers: Registry[Provider] = Registry("Provider")
        self._actions: Registry[Action] = Registry("Action")

        self._providers.add(prompt_provider(prompt))
        self._actions.add(reply_action)
        log.debug(f"Created agent model={self.settings.model}")

    @staticmethod
    def _merge_settings(
        settings: Optional[AgentSettings | Mapping[str, Any]],
    ) -> AgentSettings:
        if settings is None:
            return AgentSettings()
        if isinstance(settings, AgentSettings):
            return settings
        return dataclasses.replace(AgentSettings(), **dict(settings))

    # ------------------------------------------------------------------
    # Providers
    # ------------------------------------------------------------------

    @property
    def providers(self) -> Registry[Provider]:
        return self._providers

    def add_provider(self, provider: Provider, key: Optional[str] = None) -> "Agent":
        self._providers.add(provider, key)
        return self

    def set_provider(self, provider: Provider, key: Optional[str] = None) -> "Agent":
        self._providers.set(provider, key)
        return self

    def delete_provider(self, key: str) -> "Agent":
        self._providers.delete(key)
        return self

    def set_output(self, shape: Optional[Mapping[str, Any]] = None) -> "Agent":
        """Declare (or with no shape, clear) the structured output of `reply`."""

        scope = config.REPLY_ACTION_KEY
        if shape is None:
            self.delete_provider(OUTPUT_SHAPE_KEY)
            self.delete_provider(OUTPUT_REMINDER_KEY)
            self.output_shape = None
            return self

        fields = normalize_shape(shape)
        # both constructors reject an empty shape before anything is stored
        shape_provider = output_provider(fields, 100, scope)
        reminder = output_reminder(fields, 100, scope)
        self.set_provider(shape_provider, OUTPUT_SHAPE_KEY)
        self.set_provider(reminder, OUTPUT_REMINDER_KEY)
        self.output_shape = fields
        return self

    async def _run_provider(self, provider: Provider) -> Optional[str]:
        try:
            content = provider.producer()
            if inspect.isawaitable(content):
                content = await content
        except Exception as e:
            err = ProviderExecutionError(provider.label(), e)
            log.error(str(err))
            return None
        if content is None:
            return None
        return format_provider_content(str(content), provider.title)

    async def render(self, role: Role, scope: str) -> Optional[str]:
        """Merge the content of every provider of `role` visible to `scope`.

        Returns None when no provider matched, "" when all of them failed.
        """

        selected = self._providers.ordered(
            lambda p: p.role == role and (p.scope is None or p.scope == scope)
        )
        if not selected:
            return None

        results = await asyncio.gather(
            *(self._run_provider(provider) for _, provider in selected)
        )
        return join_with_newlines(results)

    async def prompt(self, scope: str = config.REPLY_ACTION_KEY) -> str:
        content = await self.render("prompt", scope)
        prompt = join_with_newlines([content, self.settings.end_prompt_string])
        if self.settings.debug:
            log.info(f"Prompt (action: {scope}):\n{prompt}")
        return prompt

    async def system(self, scope: str = config.REPLY_ACTION_KEY) -> str:
        content = await self.render("system", scope)
        system = content if content is not None else ""
        if self.settings.debug:
            log.info(f"System instruction (action: {scope}):\n{system}")
        return system

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    async def generate(self, prompt: str, system_instruction: str = "") -> str:
        if self.generator is None:
            raise LLMError("No text generator configured for this agent")
        return await self.generator.generate(
            prompt, self.settings.model, system_instruction
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    @property
    def actions(self) -> Registry[Action]:
        return self._actions

    def add_action(self, action: Action, key: Optional[str] = None) -> "Agent":
        self._actions.add(action, key)
        return self

    def set_action(self, action: Action, key: Optional[str] = None) -> "Agent":
        self._actions.set(action, key)
        return self

    def delete_action(self, key: str) -> "Agent":
        self._actions.delete(key)
        return self

    def toggle_action(self, key: str, enabled: bool) -> "Agent":
        action = self._actions.get(key)
        if action is None:
            raise ActionNotFoundError(key)
        # replace in place so the action keeps its registration position
        self._actions.replace(key, dataclasses.replace(action, enabled=enabled))
        return self

    async def execute(self, params: Optional[Any] = None) -> Dict[str, Any]:
        """Run every enabled action in ascending order, one after another.

        A failing action does not stop the others; its slot holds
        ``{"error": "Action failed: ..."}``.
        """

        results: Dict[str, Any] = {}
        for key, action in self._actions.ordered(lambda a: a.enabled):
            try:
                results[key] = await action.operation(self, params)
            except Exception as e:
                err = ActionExecutionError(key, e)
                log.error(f'Error executing action "{action.label()}": {e}')
                results[key] = err.as_result()

        if self.settings.debug:
            log.info(f"Action results: {results}")
        return results
