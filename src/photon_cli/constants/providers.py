"""Provider constants - no more magic strings!"""

# OpenRouter (OpenAI-compatible chat completions)
OPENROUTER_API_BASE = "https://openrouter.ai/api/v1"
OPENROUTER_CHAT_URL = f"{OPENROUTER_API_BASE}/chat/completions"

# Headers identifying the calling application to OpenRouter
APP_REFERER = "https://github.com/dig-research-tool"
APP_TITLE = "Photon Research Tool"

# Identifiers with this prefix name an OpenRouter model directly
ONLINE_MODEL_PREFIX = "__online__"

__all__ = [
    "OPENROUTER_API_BASE",
    "OPENROUTER_CHAT_URL",
    "APP_REFERER",
    "APP_TITLE",
    "ONLINE_MODEL_PREFIX",
]
