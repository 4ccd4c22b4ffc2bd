from .log_params import log_params_action
from .reply import reply_action

__all__ = ["log_params_action", "reply_action"]
