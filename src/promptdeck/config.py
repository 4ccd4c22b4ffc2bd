import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "").upper()

# --- Agent defaults ---
DEFAULT_MODEL = os.getenv("PROMPTDECK_MODEL", "gemini-2.0-flash")
END_PROMPT_STRING = os.getenv("PROMPTDECK_END_PROMPT", "# OUTPUT")
DEBUG = os.getenv("PROMPTDECK_DEBUG", "").strip().lower() in ("1", "true", "yes")

# Heading marker prefixed to titled provider content
TITLE_MARKER = "# "

# Scope of the default reply action
REPLY_ACTION_KEY = "reply"

# --- LLM backends ---
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
LLM_TIMEOUT_S = float(os.getenv("PROMPTDECK_LLM_TIMEOUT_S", "60"))
