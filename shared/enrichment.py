# Pulse Enrichment
# Reply, summary and recommended actions for a single review

from concurrent.futures import ThreadPoolExecutor, wait

from .generation import get_default_client
from .gibberish import is_gibberish
from .models import EnrichmentResult, Success
from .parsing import parse_text, parse_actions
from .prompts import build_reply_prompt, build_summary_prompt, build_actions_prompt

# Extra seconds on top of the client timeout before a branch is abandoned
JOIN_GRACE_SECONDS = 5.0

# ===================
# FALLBACK CONTENT
# ===================

REPLY_FALLBACK = (
    'Thank you for your valuable feedback! '
    'We appreciate you taking the time to share your thoughts with us.'
)

ACTIONS_FALLBACK = (
    'Review customer feedback regularly',
    'Address specific concerns raised',
    'Follow up with customer to ensure satisfaction'
)

GIBBERISH_REPLY = (
    'Thank you for your feedback! '
    'If you have a moment, we would love to hear a little more about your experience.'
)

GIBBERISH_ACTIONS = (
    'Request clarification from the customer about their experience',
    'Follow up to gather more specific feedback',
    'Review the feedback form to encourage detailed responses'
)


def summary_fallback(rating):
    return f'Customer provided a {rating}-star review with feedback about their experience.'


def gibberish_result(rating):
    """Fixed result for reviews that fail the gibberish filter"""
    return EnrichmentResult(
        user_reply=GIBBERISH_REPLY,
        admin_summary=f'Customer provided a {rating}-star rating with unclear or invalid feedback text.',
        recommended_actions=GIBBERISH_ACTIONS
    )


# ===================
# PIPELINE
# ===================

def _branch(client, label, prompt, parse, fallback):
    """Generate and parse one artifact, resolving any failure to fallback"""
    outcome = client.generate(prompt, label=label)
    if not isinstance(outcome, Success):
        return fallback
    return parse(outcome.text)


def enrich(rating, review, client=None):
    """Build the EnrichmentResult for a validated rating and review.

    Gibberish reviews get a fixed result and no Claude calls. Otherwise the
    reply, summary and actions are generated concurrently; each one falls
    back to its own static content if its call fails. Never raises.
    """
    if is_gibberish(review):
        print(f"Gibberish review detected ({rating}-star), skipping generation")
        return gibberish_result(rating)

    client = client or get_default_client()

    branches = {
        'reply': (build_reply_prompt(rating, review), parse_text, REPLY_FALLBACK),
        'summary': (build_summary_prompt(rating, review), parse_text, summary_fallback(rating)),
        'actions': (build_actions_prompt(rating, review), parse_actions, list(ACTIONS_FALLBACK))
    }
    wait_seconds = getattr(client, 'timeout', None)
    if isinstance(wait_seconds, (int, float)):
        wait_seconds += JOIN_GRACE_SECONDS
    else:
        wait_seconds = None

    results = {}
    executor = ThreadPoolExecutor(max_workers=len(branches), thread_name_prefix='enrich-')
    try:
        futures = {
            label: executor.submit(_branch, client, label, prompt, parse, fallback)
            for label, (prompt, parse, fallback) in branches.items()
        }
        done, _ = wait(futures.values(), timeout=wait_seconds)
        for label, future in futures.items():
            fallback = branches[label][2]
            if future not in done:
                print(f"Generation [{label}] timed out, using fallback")
                results[label] = fallback
                continue
            try:
                results[label] = future.result()
            except Exception as e:
                print(f"Error building {label}: {e}")
                results[label] = fallback
    finally:
        executor.shutdown(wait=False)

    return EnrichmentResult(
        user_reply=results['reply'],
        admin_summary=results['summary'],
        recommended_actions=tuple(results['actions'])
    )
