# config.py
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# ---------------------------
# LLM gateway
# ---------------------------
LLM_API_KEY = os.getenv("LLM_API_KEY") or os.getenv("LOVABLE_API_KEY")
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://ai.gateway.lovable.dev/v1")
LLM_MODEL = os.getenv("LLM_MODEL", "google/gemini-2.5-flash")

LLM_TIMEOUT = int(os.getenv("LLM_TIMEOUT", "45"))
LLM_RETRIES = int(os.getenv("LLM_RETRIES", "2"))
LLM_RETRY_BASE_DELAY = float(os.getenv("LLM_RETRY_BASE_DELAY", "0.6"))

MAX_TOKENS = int(os.getenv("MAX_TOKENS", "800"))
POSITIONING_TEMPERATURE = float(os.getenv("POSITIONING_TEMPERATURE", "0.2"))

# ---------------------------
# Webhook (automation endpoint)
# ---------------------------
WEBHOOK_URL = os.getenv("WEBHOOK_URL", "")
WEBHOOK_TIMEOUT = float(os.getenv("WEBHOOK_TIMEOUT", "15"))

# ---------------------------
# HTTP server
# ---------------------------
FRONTEND_ORIGINS = os.getenv("FRONTEND_ORIGINS") or os.getenv("FRONTEND_ORIGIN", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Inputs are truncated to this many characters before templating
MAX_INPUT_CHARS = 1200
