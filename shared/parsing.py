# Pulse Response Parsing
# Turns raw Claude text into reply/summary strings and action lists

import json
import re

from .helpers import strip_markdown_fences

MAX_ACTIONS = 3
MIN_ACTION_LENGTH = 10

# Used when no stage can pull a single action out of the response
GENERIC_ACTIONS = (
    'Review customer feedback regularly',
    'Address specific concerns raised',
    'Follow up with customer'
)

BULLET_PREFIX = re.compile(r'^[-•*]\s*')
NUMBER_PREFIX = re.compile(r'^\d+\.\s*')
WRAPPING_QUOTES = re.compile(r"^([\"'])(.*)\1,?$")


def parse_text(raw):
    """Reply and summary need no structure, just trimming"""
    return raw.strip()


def _string_array(value):
    """First 3 entries of a non-empty list of strings, else None"""
    if not isinstance(value, list) or not value:
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return [item.strip() for item in value[:MAX_ACTIONS]]


def parse_strict_json(text):
    """The whole response is a JSON array of strings"""
    try:
        return _string_array(json.loads(text))
    except ValueError:
        return None


def parse_embedded_array(text):
    """The first JSON array of strings somewhere inside surrounding prose"""
    decoder = json.JSONDecoder()
    start = text.find('[')
    while start != -1:
        try:
            value, _ = decoder.raw_decode(text, start)
        except ValueError:
            value = None
        actions = _string_array(value)
        if actions is not None:
            return actions
        start = text.find('[', start + 1)
    return None


def parse_action_lines(text):
    """Bulleted or numbered lines, one action per line.

    Lines of 10 characters or fewer, and leftover JSON fragments starting
    with '[' or '{', are dropped.
    """
    actions = []
    for line in text.split('\n'):
        line = line.strip()
        line = BULLET_PREFIX.sub('', line)
        line = NUMBER_PREFIX.sub('', line)
        line = WRAPPING_QUOTES.sub(r"\2", line).strip()
        if len(line) > MIN_ACTION_LENGTH and not line.startswith(('[', '{')):
            actions.append(line)
        if len(actions) == MAX_ACTIONS:
            break
    return actions or None


ACTION_STAGES = (parse_strict_json, parse_embedded_array, parse_action_lines)


def parse_actions(raw):
    """Parse the recommended-actions response.

    Tries each stage in ACTION_STAGES on the fence-stripped text and returns
    the first list produced. Falls back to GENERIC_ACTIONS.
    """
    text = strip_markdown_fences(raw)
    for stage in ACTION_STAGES:
        actions = stage(text)
        if actions is not None:
            return actions
    return list(GENERIC_ACTIONS)
