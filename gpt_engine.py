# gpt_engine.py
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from openai import OpenAI
from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    InternalServerError,
    RateLimitError,
)

import config
import prompts
from models import PositioningRequest, PositioningResult
from tagline_formatter import format_tagline
from utils import clean_text, strip_code_fences

logger = logging.getLogger(__name__)

_client: Optional[OpenAI] = None
_client_lock = threading.Lock()


# ---------------------------
# Errors
# ---------------------------
class GatewayError(Exception):
    """The LLM gateway failed; ``status_code`` is what the API should answer with."""

    status_code = 502
    message = "AI gateway error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class RateLimitedError(GatewayError):
    status_code = 429
    message = "Rate limit exceeded. Please try again in a moment."


class PaymentRequiredError(GatewayError):
    status_code = 402
    message = "AI credits depleted. Please add funds to continue."


class GatewayTimeoutError(GatewayError):
    status_code = 504
    message = "Upstream model timeout."


# Order in which concurrent failures are reported
_ERROR_PRECEDENCE = (RateLimitedError, PaymentRequiredError, GatewayTimeoutError, GatewayError)


# ---------------------------
# Client
# ---------------------------
def get_client() -> OpenAI:
    """OpenAI-compatible client for the gateway, built on first use."""
    global _client
    if _client is None:
        # The fan-out threads can all arrive here before the first client exists
        with _client_lock:
            if _client is None:
                if not config.LLM_API_KEY:
                    raise RuntimeError("LLM_API_KEY is not configured")
                _client = OpenAI(
                    api_key=config.LLM_API_KEY,
                    base_url=config.LLM_BASE_URL,
                    timeout=config.LLM_TIMEOUT,
                    max_retries=0,
                )
    return _client


def chat_with_retries(messages: List[Dict[str, str]], temperature: Optional[float] = None):
    attempts = config.LLM_RETRIES
    base_delay = config.LLM_RETRY_BASE_DELAY
    kwargs = {"model": config.LLM_MODEL, "messages": messages, "max_tokens": config.MAX_TOKENS}
    if temperature is not None:
        kwargs["temperature"] = temperature

    for i in range(attempts + 1):
        try:
            return get_client().chat.completions.create(**kwargs)
        except (APITimeoutError, APIConnectionError, RateLimitError, InternalServerError) as e:
            if i >= attempts:
                raise
            logger.warning("Gateway call failed (%s), retry %d/%d", type(e).__name__, i + 1, attempts)
            time.sleep(base_delay * (2 ** i))


def complete(messages: List[Dict[str, str]], temperature: Optional[float] = None) -> str:
    """Run one chat completion and return its text, mapping SDK errors to GatewayError."""
    try:
        response = chat_with_retries(messages, temperature=temperature)
    except RateLimitError as e:
        raise RateLimitedError() from e
    except APITimeoutError as e:
        raise GatewayTimeoutError() from e
    except APIStatusError as e:
        if e.status_code == 402:
            raise PaymentRequiredError() from e
        logger.error("AI gateway error: status %s", e.status_code)
        raise GatewayError() from e
    except APIConnectionError as e:
        logger.error("AI gateway unreachable: %s", e)
        raise GatewayError() from e

    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    return choices[0].message.content or ""


def _first_error(errors: List[GatewayError]) -> GatewayError:
    for kind in _ERROR_PRECEDENCE:
        for err in errors:
            if isinstance(err, kind):
                return err
    return errors[0]


def sanitize_positioning(draft: str, competitors: str) -> str:
    """Ask the model to generalize brand names out of the draft; keep the draft on failure."""
    if not draft:
        return draft
    try:
        sanitized = complete(
            prompts.sanitize_messages(draft, competitors),
            temperature=config.POSITIONING_TEMPERATURE,
        )
    except GatewayError as e:
        logger.warning("Sanitize pass failed, keeping draft: %s", e)
        return draft
    return sanitized or draft


def generate_positioning_outputs(request: PositioningRequest) -> PositioningResult:
    """
    Generate positioning statement, UVP, tagline and insights for ``request``.

    The four prompts run concurrently and all of them are awaited before any
    post-processing. If any call fails the most specific error is raised
    (rate limit, then payment, then timeout, then generic).
    """
    logger.info("Generating positioning outputs for: %s", request.product_name)

    jobs = {
        "positioning": (prompts.positioning_messages(request), config.POSITIONING_TEMPERATURE),
        "uvp": (prompts.uvp_messages(request), None),
        "tagline": (prompts.tagline_messages(request), None),
        "insights": (prompts.insights_messages(request), None),
    }
    with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
        futures = {name: pool.submit(complete, msgs, temp) for name, (msgs, temp) in jobs.items()}

    raw, errors = {}, []
    for name, future in futures.items():
        try:
            raw[name] = future.result()
        except GatewayError as e:
            errors.append(e)
    if errors:
        raise _first_error(errors)

    positioning = sanitize_positioning(raw["positioning"], request.competitors)

    logger.debug("tagline_raw: %r", raw["tagline"])
    tagline = format_tagline(strip_code_fences(raw["tagline"]), request.competitors)
    logger.debug("tagline_formatted: %r", tagline)

    logger.info("Successfully generated all positioning outputs")
    return PositioningResult(
        positioning=clean_text(positioning),
        uvp=clean_text(raw["uvp"], keep_lines=True),
        tagline=tagline,
        insights=clean_text(raw["insights"], keep_lines=True),
    )
