"""Global configuration values."""

import os

# Default Gemini model (can be overridden via env)
DEFAULT_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.0-flash")

# Model used when LLM_PROVIDER=openai
OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o")

# Which provider backs LLMService: "gemini" or "openai"
LLM_PROVIDER = os.environ.get("LLM_PROVIDER", "gemini").lower()

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Request bodies carry whole offer collections
MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", 16 * 1024 * 1024))

# Language the offer drafting prompt asks the model to write in
OFFER_LANGUAGE = os.environ.get("OFFER_LANGUAGE", "English")
