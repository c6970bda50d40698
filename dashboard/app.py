# Pulse Dashboard
# Admin view over customer feedback, with Claude-backed Q&A

import sys
import os

# Add parent directory to path for shared imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, request, jsonify

from shared import (
    ValidationError,
    get_all_submissions,
    answer_admin_query,
    rating_breakdown,
    require_admin,
    verify_admin_credentials,
    admin_user,
    issue_token
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


def parse_rating_filter(value):
    """Parse the ?rating= query param. Returns None when absent."""
    if value is None or value == '':
        return None
    try:
        rating = int(value)
    except ValueError:
        raise ValidationError([{'field': 'rating', 'message': 'Rating filter must be a number between 1 and 5'}])
    if not 1 <= rating <= 5:
        raise ValidationError([{'field': 'rating', 'message': 'Rating filter must be a number between 1 and 5'}])
    return rating


@app.route('/auth/admin/login', methods=['POST'])
def admin_login():
    """Admin login.

    Accepts:
        - email
        - password

    Returns:
        - user: Admin user fields
        - token: JWT bearer token with the admin role
    """
    try:
        data = _json_body()

        if not verify_admin_credentials(data.get('email'), data.get('password')):
            print("Admin login failed")
            return jsonify({'success': False, 'error': 'Invalid credentials'}), 401

        user = admin_user()
        return jsonify({
            'success': True,
            'user': user,
            'token': issue_token(user)
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


@app.route('/admin/submissions', methods=['GET'])
@require_admin
def submissions():
    """All submissions, newest first.

    Accepts:
        - rating (query, optional): Only return this star rating
    """
    try:
        rating = parse_rating_filter(request.args.get('rating'))
        results = get_all_submissions(rating=rating)

        return jsonify({
            'success': True,
            'submissions': results,
            'count': len(results)
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


@app.route('/admin/stats', methods=['GET'])
@require_admin
def stats():
    """Submission count, average rating and per-star distribution"""
    try:
        breakdown = rating_breakdown(get_all_submissions())
        # JSON object keys are strings
        breakdown['distribution'] = {str(star): n for star, n in breakdown['distribution'].items()}
        return jsonify({'success': True, **breakdown})

    except Exception as e:
        return jsonify({
            'error': 'Internal server error',
            'details': str(e)
        }), 500


@app.route('/admin/chat', methods=['POST'])
@require_admin
def chat():
    """Answer a natural-language question about the feedback history.

    Accepts:
        - message: The admin's question

    Returns:
        - response: Claude's answer, or a fixed fallback message
    """
    try:
        data = _json_body()
        question = data.get('message')

        if not isinstance(question, str) or not question.strip():
            return jsonify({'success': False, 'error': 'Message cannot be empty'}), 400

        answer = answer_admin_query(question, get_all_submissions())

        return jsonify({
            'success': True,
            'response': answer
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


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'Pulse Dashboard',
        'version': '1.0'
    })


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    app.run(host='0.0.0.0', port=port)
