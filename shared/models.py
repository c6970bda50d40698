# Pulse Shared Models
# Value types passed between the web layer and the enrichment pipeline

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .config import REVIEW_MAX_LENGTH


class ValidationError(Exception):
    """Raised when a request payload fails validation.

    `details` is a list of {'field': ..., 'message': ...} dicts, returned
    to the client as-is.
    """

    def __init__(self, details):
        self.details = details
        super().__init__('; '.join(f"{d['field']}: {d['message']}" for d in details))


@dataclass(frozen=True)
class FeedbackInput:
    rating: int
    review: str

    @classmethod
    def from_payload(cls, data):
        """Validate a raw JSON body into a FeedbackInput.

        Rating must be an integer 1-5 (4.0 is accepted, True is not).
        Review must be 1-2000 characters and non-empty once trimmed.
        """
        if not isinstance(data, dict):
            data = {}
        errors = []

        rating = data.get('rating')
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            errors.append({'field': 'rating', 'message': 'Rating must be a number between 1 and 5'})
        elif not float(rating).is_integer() or not 1 <= rating <= 5:
            errors.append({'field': 'rating', 'message': 'Rating must be a whole number between 1 and 5'})

        review = data.get('review')
        if not isinstance(review, str) or not review.strip():
            errors.append({'field': 'review', 'message': 'Review cannot be empty'})
        elif len(review) > REVIEW_MAX_LENGTH:
            errors.append({'field': 'review', 'message': f'Review must be at most {REVIEW_MAX_LENGTH} characters'})

        if errors:
            raise ValidationError(errors)

        return cls(rating=int(rating), review=review.strip())


@dataclass(frozen=True)
class EnrichmentResult:
    user_reply: str
    admin_summary: str
    recommended_actions: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self):
        return {
            'userReply': self.user_reply,
            'adminSummary': self.admin_summary,
            'recommendedActions': list(self.recommended_actions)
        }


@dataclass(frozen=True)
class Success:
    text: str
    elapsed_ms: Optional[float] = None


@dataclass(frozen=True)
class Failure:
    reason: str
    elapsed_ms: Optional[float] = None


GenerationOutcome = Union[Success, Failure]
