# Pulse Admin Insights
# Natural-language questions over the stored feedback history

from .config import ADMIN_CONTEXT_LIMIT
from .generation import get_default_client
from .helpers import format_date_display
from .models import Success, ValidationError
from .prompts import build_admin_query_prompt

NO_FEEDBACK_ANSWER = (
    "There is no customer feedback yet, so there is nothing to analyse. "
    "Check back once some submissions have come in."
)

QUERY_FALLBACK_ANSWER = (
    "Sorry, I'm unable to answer that right now. "
    "Please try again in a moment, or review the submissions list directly."
)


def rating_breakdown(submissions):
    """Count, average and per-star distribution for a list of submissions"""
    distribution = {star: 0 for star in range(5, 0, -1)}
    for submission in submissions:
        rating = submission.get('rating')
        if rating in distribution:
            distribution[rating] += 1

    count = len(submissions)
    total = sum(star * n for star, n in distribution.items())
    rated = sum(distribution.values())

    return {
        'count': count,
        'averageRating': round(total / rated, 1) if rated else None,
        'distribution': distribution
    }


def build_feedback_context(submissions, limit=ADMIN_CONTEXT_LIMIT):
    """Render aggregate stats plus the most recent submissions as prompt text.

    Assumes submissions are sorted newest first.
    """
    stats = rating_breakdown(submissions)

    lines = [
        f"Total submissions: {stats['count']}",
        f"Average rating: {stats['averageRating']}/5",
        'Rating distribution:'
    ]
    for star, n in stats['distribution'].items():
        lines.append(f"  {star} stars: {n}")

    recent = submissions[:limit]
    lines.append('')
    lines.append(f"Most recent {len(recent)} submissions:")
    for submission in recent:
        date = format_date_display(submission.get('createdAt', ''))
        lines.append(f"- [{submission.get('rating')}/5, {date}] {submission.get('review', '')}")
        if submission.get('aiSummary'):
            lines.append(f"  Summary: {submission['aiSummary']}")

    return '\n'.join(lines)


def answer_admin_query(question, submissions, client=None):
    """Answer an admin's question about the feedback history.

    Raises ValidationError for a blank question. Generation failures return
    QUERY_FALLBACK_ANSWER rather than raising.
    """
    if not isinstance(question, str) or not question.strip():
        raise ValidationError([{'field': 'message', 'message': 'Message cannot be empty'}])

    if not submissions:
        return NO_FEEDBACK_ANSWER

    client = client or get_default_client()
    prompt = build_admin_query_prompt(question, build_feedback_context(submissions))

    outcome = client.generate(prompt, label='admin-chat')
    if not isinstance(outcome, Success):
        return QUERY_FALLBACK_ANSWER

    return outcome.text.strip()
