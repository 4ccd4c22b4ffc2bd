from __future__ import annotations

import datetime
from typing import Callable, Optional

from promptdeck import logger as logger_mod

from ..types import Provider, Role


def current_time_provider(
    *,
    key: str = "currentTime",
    role: Role = "system",
    order: float = 0,
    title: Optional[str] = "Current Time",
    scope: Optional[str] = None,
    now: Callable[[], datetime.datetime] = datetime.datetime.now,
) -> Provider:
    """Provider rendering the wall-clock time at render time."""

    async def produce() -> str:
        return logger_mod.format_date(now())

    return Provider(
        key=key, role=role, producer=produce, order=order, title=title, scope=scope
    )
