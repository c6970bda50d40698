"""Tests for feedback input validation and result types."""

import pytest

from shared.models import EnrichmentResult, FeedbackInput, ValidationError


class TestFeedbackInput:

    def test_valid_payload(self):
        feedback = FeedbackInput.from_payload({'rating': 4, 'review': '  Lovely place  '})
        assert feedback == FeedbackInput(rating=4, review='Lovely place')

    def test_integral_float_rating(self):
        assert FeedbackInput.from_payload({'rating': 5.0, 'review': 'Great'}).rating == 5

    @pytest.mark.parametrize('rating', [0, 6, -1, 3.5, 'five', '4', None, True])
    def test_invalid_rating(self, rating):
        with pytest.raises(ValidationError) as exc:
            FeedbackInput.from_payload({'rating': rating, 'review': 'Great coffee'})
        assert [d['field'] for d in exc.value.details] == ['rating']

    @pytest.mark.parametrize('review', ['', '   ', None, 42])
    def test_empty_review(self, review):
        with pytest.raises(ValidationError) as exc:
            FeedbackInput.from_payload({'rating': 3, 'review': review})
        assert [d['field'] for d in exc.value.details] == ['review']

    def test_review_too_long(self):
        with pytest.raises(ValidationError):
            FeedbackInput.from_payload({'rating': 3, 'review': 'x' * 2001})

    def test_review_at_limit(self):
        assert len(FeedbackInput.from_payload({'rating': 3, 'review': 'x' * 2000}).review) == 2000

    def test_missing_body_reports_both_fields(self):
        with pytest.raises(ValidationError) as exc:
            FeedbackInput.from_payload(None)
        assert {d['field'] for d in exc.value.details} == {'rating', 'review'}

    def test_is_immutable(self):
        feedback = FeedbackInput(rating=3, review='ok then')
        with pytest.raises(AttributeError):
            feedback.rating = 5


def test_enrichment_result_to_dict():
    result = EnrichmentResult('Thanks!', 'Happy customer.', ('Keep it up',))
    assert result.to_dict() == {
        'userReply': 'Thanks!',
        'adminSummary': 'Happy customer.',
        'recommendedActions': ['Keep it up']
    }
