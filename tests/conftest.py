"""Shared fixtures for Pulse tests.

Generation is never real here: tests use FakeClient, which answers by
artifact label, or patch the Anthropic SDK directly.
"""

import threading

import pytest

from shared import auth
from shared.models import Success, Failure


class FakeClient:
    """Stand-in for GenerationClient keyed by call label.

    Labels missing from `responses`, or listed in `fail`, return Failure.
    """

    def __init__(self, responses=None, fail=()):
        self.responses = dict(responses or {})
        self.fail = set(fail)
        self.calls = []
        self._lock = threading.Lock()

    def generate(self, prompt, label='generate'):
        with self._lock:
            self.calls.append((label, prompt))
        if label in self.fail or label not in self.responses:
            return Failure(reason='provider unavailable')
        return Success(text=self.responses[label])

    @property
    def labels(self):
        return sorted(label for label, _ in self.calls)


GOOD_RESPONSES = {
    'reply': '  Thank you so much for the kind words about our delivery team!  ',
    'summary': 'Positive review praising fast delivery and friendly staff.',
    'actions': '["Recognise the delivery team publicly", "Keep delivery staffing levels", "Ask happy customers for referrals"]',
}


@pytest.fixture
def fake_client():
    """Factory for FakeClient instances"""
    return FakeClient


@pytest.fixture
def good_responses():
    return dict(GOOD_RESPONSES)


@pytest.fixture
def customer():
    return {
        'recordId': 'recUser1',
        'id': 'user-1700000000000',
        'email': 'jo@example.com',
        'name': 'Jo Customer',
        'passwordHash': auth.hash_password('hunter22'),
        'role': 'user'
    }


@pytest.fixture
def user_headers(customer, monkeypatch):
    """Bearer headers for a stored customer account"""
    monkeypatch.setattr(auth, 'find_user_by_id', lambda user_id: customer if user_id == customer['id'] else None)
    return {'Authorization': f"Bearer {auth.issue_token(customer)}"}


@pytest.fixture
def admin_headers():
    return {'Authorization': f"Bearer {auth.issue_token(auth.admin_user())}"}


@pytest.fixture
def feedback_client():
    from feedback.app import app
    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture
def dashboard_client():
    from dashboard.app import app
    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture
def sample_submissions():
    return [
        {
            'id': 'fb_3', 'userId': 'user-1', 'rating': 1,
            'review': 'Order arrived two weeks late and nobody answered my emails.',
            'aiSummary': 'Very negative: late delivery and unresponsive support.',
            'recommendedActions': ['Audit courier delays'], 'userResponse': 'Sorry!',
            'createdAt': '2024-03-05T10:00:00+00:00'
        },
        {
            'id': 'fb_2', 'userId': 'user-2', 'rating': 5,
            'review': 'Fantastic service, the staff were lovely.',
            'aiSummary': 'Very positive about staff.',
            'recommendedActions': [], 'userResponse': 'Thanks!',
            'createdAt': '2024-03-04T10:00:00+00:00'
        },
        {
            'id': 'fb_1', 'userId': 'user-1', 'rating': 4,
            'review': 'Good food but the music was a bit loud.',
            'aiSummary': '',
            'recommendedActions': [], 'userResponse': 'Thanks!',
            'createdAt': '2024-03-01T10:00:00+00:00'
        },
    ]
