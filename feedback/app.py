# Pulse Feedback
# Customer-facing feedback submission and accounts

import sys
import os

# Add parent directory to path for shared imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, request, jsonify, g

from shared import (
    FeedbackInput,
    ValidationError,
    enrich,
    generate_submission_id,
    generate_user_id,
    utc_now_iso,
    get_submissions_for_user,
    find_user_by_email,
    create_submission,
    create_user,
    require_auth,
    issue_token,
    hash_password,
    verify_password,
    public_user
)

app = Flask(__name__)


def _json_body():
    """Request JSON as a dict. A missing body is {}, anything but an object is a 400."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError([{'field': 'body', 'message': 'Request body must be a JSON object'}])
    return data

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6


def _auth_response(user):
    return jsonify({
        'success': True,
        'user': public_user(user),
        'token': issue_token(user)
    })


# ===================
# ACCOUNTS
# ===================

@app.route('/auth/register', methods=['POST'])
def register():
    """Create a user account.

    Accepts:
        - name: At least 2 characters
        - email: Must contain '@'
        - password: At least 6 characters

    Returns:
        - user: Public user fields
        - token: JWT bearer token
    """
    try:
        data = _json_body()

        name = str(data.get('name') or '').strip()
        email = str(data.get('email') or '').strip().lower()
        password = str(data.get('password') or '')

        if len(name) < MIN_NAME_LENGTH:
            return jsonify({'success': False, 'error': 'Name must be at least 2 characters'}), 400

        if '@' not in email:
            return jsonify({'success': False, 'error': 'Valid email is required'}), 400

        if len(password) < MIN_PASSWORD_LENGTH:
            return jsonify({'success': False, 'error': 'Password must be at least 6 characters'}), 400

        if find_user_by_email(email):
            return jsonify({'success': False, 'error': 'Email already registered'}), 400

        user = create_user(
            user_id=generate_user_id(),
            email=email,
            name=name,
            password_hash=hash_password(password)
        )

        if not user:
            return jsonify({'success': False, 'error': 'Registration failed'}), 500

        print(f"Registered user {user['id']}")
        return _auth_response(user)

    except ValidationError as e:
        return jsonify({
            'success': False,
            'error': 'Invalid request data',
            'details': e.details
        }), 400
    except Exception as e:
        return jsonify({
            'error': 'Internal server error',
            'details': str(e)
        }), 500


@app.route('/auth/login', methods=['POST'])
def login():
    """Log in with email and password"""
    try:
        data = _json_body()

        email = str(data.get('email') or '').strip().lower()
        password = str(data.get('password') or '')

        if not email or not password:
            return jsonify({'success': False, 'error': 'Email and password are required'}), 400

        user = find_user_by_email(email)

        if not user or user['role'] != 'user' or not verify_password(password, user['passwordHash']):
            return jsonify({'success': False, 'error': 'Invalid email or password'}), 401

        return _auth_response(user)

    except ValidationError as e:
        return jsonify({
            'success': False,
            'error': 'Invalid request data',
            'details': e.details
        }), 400
    except Exception as e:
        return jsonify({
            'error': 'Internal server error',
            'details': str(e)
        }), 500


@app.route('/auth/me', methods=['GET'])
@require_auth
def me():
    """Current user from the bearer token"""
    return jsonify(public_user(g.user))


# ===================
# FEEDBACK
# ===================

@app.route('/feedback/submit', methods=['POST'])
@require_auth
def submit():
    """Submit a rating and review.

    Accepts:
        - rating: Integer 1-5
        - review: 1-2000 characters

    Returns:
        - aiResponse: Generated reply shown to the customer
        - submissionId: ID of the stored submission
    """
    try:
        feedback = FeedbackInput.from_payload(request.get_json(silent=True))

        result = enrich(feedback.rating, feedback.review)

        submission = {
            'id': generate_submission_id(),
            'userId': g.user['id'],
            'name': g.user.get('name', ''),
            'email': g.user.get('email', ''),
            'rating': feedback.rating,
            'review': feedback.review,
            'aiSummary': result.admin_summary,
            'recommendedActions': list(result.recommended_actions),
            'userResponse': result.user_reply,
            'createdAt': utc_now_iso()
        }

        if not create_submission(submission):
            return jsonify({
                'success': False,
                'error': 'Could not save feedback'
            }), 500

        return jsonify({
            'success': True,
            'aiResponse': result.user_reply,
            'submissionId': submission['id']
        })

    except ValidationError as e:
        return jsonify({
            'success': False,
            'error': 'Invalid request data',
            'details': e.details
        }), 400
    except Exception as e:
        return jsonify({
            'error': 'Internal server error',
            'details': str(e)
        }), 500


@app.route('/feedback/mine', methods=['GET'])
@require_auth
def my_submissions():
    """Current user's submissions, newest first"""
    try:
        submissions = get_submissions_for_user(g.user['id'])
        return jsonify({
            'success': True,
            'submissions': submissions,
            'count': len(submissions)
        })

    except Exception as e:
        return jsonify({
            'error': 'Internal server error',
            'details': str(e)
        }), 500


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'Pulse Feedback',
        'version': '1.0'
    })


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    app.run(host='0.0.0.0', port=port)
