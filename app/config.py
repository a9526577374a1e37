"""
Configuration settings for the profile2resume application.

Values come from the environment (or a local .env file). The API key can
also be typed into the UI, in which case it overrides the environment.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os

# LLM Provider Configuration
# Set to "openai", "groq" or "ollama"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").lower()

PROVIDERS = ("openai", "groq", "ollama")

# Model Configuration
DEFAULT_MODEL = {
    "openai": "gpt-4o-mini",
    "groq": "llama-3.3-70b-versatile",
    "ollama": "deepseek-coder-v2",
}

# Groq keys are recognisable by their prefix, everything else goes to OpenAI
GROQ_KEY_PREFIX = "gsk_"

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
GROQ_API_KEY = os.getenv("GROQ_API_KEY")

# Extraction wants the same answer for the same profile
MODEL_PARAMS = {
    "temperature": 0,
    "max_tokens": 4096
}

# Ollama Configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_model_for_provider(provider: str = None) -> str:
    """Get the default model for the specified provider."""
    provider = provider or LLM_PROVIDER
    return DEFAULT_MODEL.get(provider, DEFAULT_MODEL["openai"])


def backend_for_key(api_key: str | None) -> str:
    """Pick the hosted backend an API key belongs to."""
    if api_key and api_key.strip().startswith(GROQ_KEY_PREFIX):
        return "groq"
    return "openai"


def api_key_for_provider(provider: str) -> str | None:
    """Environment fallback for the key of a hosted provider."""
    return {"openai": OPENAI_API_KEY, "groq": GROQ_API_KEY}.get(provider)
