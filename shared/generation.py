# Pulse Generation Client
# Single-shot Claude calls that never raise

import threading
import time

import httpx
from anthropic import Anthropic

from .config import (
    ANTHROPIC_API_KEY,
    ANTHROPIC_MODEL,
    GENERATION_MAX_TOKENS,
    GENERATION_TEMPERATURE,
    GENERATION_TIMEOUT
)
from .models import Success, Failure


class ProviderError(Exception):
    """Claude could not produce text for a prompt"""


def print_timing(label, elapsed_ms, ok):
    """Default timing hook - one line per call to stdout"""
    status = 'ok' if ok else 'failed'
    print(f"Generation [{label}] {status} in {elapsed_ms:.0f}ms")


class GenerationClient:
    """Wraps one Claude Messages call per prompt.

    generate() returns Success(text) or Failure(reason). Transport errors,
    API errors, empty responses and anything raised by an injected
    `complete` callable are all reported as Failure.

    Args:
        complete: Optional callable prompt -> text used instead of the
            Anthropic SDK (tests, alternative providers)
        on_timing: Optional hook called with (label, elapsed_ms, ok)
        timeout: Per-call HTTP timeout in seconds
    """

    def __init__(self, complete=None, on_timing=print_timing, timeout=GENERATION_TIMEOUT,
                 api_key=ANTHROPIC_API_KEY, model=ANTHROPIC_MODEL):
        self.timeout = timeout
        self.model = model
        self.on_timing = on_timing
        self._api_key = api_key
        self._anthropic = None
        self._complete = complete or self._complete_with_anthropic

        # One SDK client per GenerationClient, shared by the enrichment threads
        if complete is None and api_key:
            # No SDK retries: a failed call goes straight to fallback text
            self._anthropic = Anthropic(
                api_key=api_key,
                max_retries=0,
                http_client=httpx.Client(timeout=timeout, follow_redirects=True)
            )

    def _complete_with_anthropic(self, prompt):
        if not self._api_key:
            raise ProviderError('No Anthropic API key configured')

        response = self._anthropic.messages.create(
            model=self.model,
            max_tokens=GENERATION_MAX_TOKENS,
            temperature=GENERATION_TEMPERATURE,
            messages=[
                {'role': 'user', 'content': prompt}
            ]
        )

        return ''.join(block.text for block in response.content if getattr(block, 'type', None) == 'text')

    def generate(self, prompt, label='generate'):
        """Run a single generation call.

        Returns:
            Success with the raw text, or Failure with a short reason
        """
        start = time.monotonic()
        try:
            text = self._complete(prompt)
            if not text or not text.strip():
                raise ProviderError('Empty response from Claude')
            outcome = Success(text=text, elapsed_ms=(time.monotonic() - start) * 1000)
        except Exception as e:
            print(f"Error generating {label}: {e}")
            outcome = Failure(reason=str(e) or type(e).__name__, elapsed_ms=(time.monotonic() - start) * 1000)

        if self.on_timing:
            self.on_timing(label, outcome.elapsed_ms, isinstance(outcome, Success))

        return outcome


_default_client = None
_default_client_lock = threading.Lock()


def get_default_client():
    """Shared client for the services, created on first use"""
    global _default_client
    with _default_client_lock:
        if _default_client is None:
            _default_client = GenerationClient()
    return _default_client
