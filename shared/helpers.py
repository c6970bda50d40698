# Pulse Shared Helpers
# Utility functions used across all Pulse apps

import secrets
import string
import time
from datetime import datetime, timezone


def strip_markdown_fences(content):
    """Strip markdown code fences from a model response.

    Handles ```json ... ```, bare ``` ... ``` and a fence on only one side.
    """
    content = content.strip()
    if content.startswith('```'):
        # Remove first line (```json or ```)
        content = content.split('\n', 1)[1] if '\n' in content else content[3:]
    if content.endswith('```'):
        content = content.rsplit('```', 1)[0]
    return content.strip()


def _random_suffix(length=9):
    alphabet = string.ascii_lowercase + string.digits
    return ''.join(secrets.choice(alphabet) for _ in range(length))


def generate_submission_id():
    """Build a feedback id like 'fb_1718000000000_k3j9x0a1b'"""
    return f"fb_{int(time.time() * 1000)}_{_random_suffix()}"


def generate_user_id():
    """Build a user id like 'user-1718000000000-k3j9x0a1b'"""
    return f"user-{int(time.time() * 1000)}-{_random_suffix()}"


def utc_now_iso():
    return datetime.now(timezone.utc).isoformat()


def format_date_display(date_str):
    """Format date string to 'D MMM' format (e.g., '5 Jan')

    Args:
        date_str: ISO timestamp or plain date string

    Returns:
        Formatted string or original if parsing fails
    """
    if not date_str:
        return ''
    try:
        return datetime.fromisoformat(date_str.replace('Z', '+00:00')).strftime('%-d %b')
    except ValueError:
        pass
    for fmt in ['%Y-%m-%d', '%d/%m/%Y', '%d-%m-%Y']:
        try:
            return datetime.strptime(date_str, fmt).strftime('%-d %b')
        except ValueError:
            continue
    return date_str
