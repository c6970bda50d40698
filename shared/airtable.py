# Pulse Shared Airtable Functions
# All Airtable read/write operations

import httpx
from .config import AIRTABLE_API_KEY, AIRTABLE_BASE_ID, AIRTABLE_FEEDBACK_TABLE, AIRTABLE_USERS_TABLE


def _get_headers():
    """Get standard Airtable headers"""
    return {
        'Authorization': f'Bearer {AIRTABLE_API_KEY}',
        'Content-Type': 'application/json'
    }


def _table_url(table):
    return f"https://api.airtable.com/v0/{AIRTABLE_BASE_ID}/{table}"


def _quote(value):
    """Quote a value for use inside a filterByFormula string"""
    return "'" + str(value).replace('\\', '\\\\').replace("'", "\\'") + "'"


def _list_records(table, params=None):
    """Fetch every record matching params, following Airtable's offset paging"""
    params = dict(params or {})
    records = []

    while True:
        response = httpx.get(_table_url(table), headers=_get_headers(), params=params, timeout=10.0)
        response.raise_for_status()

        body = response.json()
        records.extend(body.get('records', []))

        offset = body.get('offset')
        if not offset:
            return records
        params['offset'] = offset


def _submission_from_record(record):
    fields = record['fields']

    # Actions are stored one per line in a long text field
    actions = fields.get('Recommended Actions', '') or ''
    if isinstance(actions, str):
        actions = [line for line in actions.split('\n') if line.strip()]

    return {
        'id': fields.get('Submission ID', record['id']),
        'recordId': record['id'],
        'userId': fields.get('User ID', ''),
        'name': fields.get('Name', ''),
        'email': fields.get('Email', ''),
        'rating': fields.get('Rating'),
        'review': fields.get('Review', ''),
        'aiSummary': fields.get('AI Summary', ''),
        'recommendedActions': actions,
        'userResponse': fields.get('User Response', ''),
        'createdAt': fields.get('Created At', record.get('createdTime', ''))
    }


def _user_from_record(record):
    fields = record['fields']
    return {
        'recordId': record['id'],
        'id': fields.get('User ID', record['id']),
        'email': fields.get('Email', ''),
        'name': fields.get('Name', ''),
        'passwordHash': fields.get('Password Hash'),
        'role': fields.get('Role', 'user')
    }


# ===================
# READ OPERATIONS
# ===================

def get_all_submissions(rating=None):
    """Get feedback submissions, newest first.

    Optionally filtered to a single star rating.
    Used by the Dashboard for the submissions list, stats and admin chat.
    """
    if not AIRTABLE_API_KEY:
        print("No Airtable API key configured")
        return []

    try:
        params = {
            'sort[0][field]': 'Created At',
            'sort[0][direction]': 'desc'
        }
        if rating is not None:
            params['filterByFormula'] = f"{{Rating}}={int(rating)}"

        records = _list_records(AIRTABLE_FEEDBACK_TABLE, params)
        return [_submission_from_record(record) for record in records]

    except Exception as e:
        print(f"Error fetching feedback from Airtable: {e}")
        return []


def get_submissions_for_user(user_id):
    """Get one user's feedback submissions, newest first"""
    if not AIRTABLE_API_KEY:
        print("No Airtable API key configured")
        return []

    try:
        params = {
            'filterByFormula': f"{{User ID}}={_quote(user_id)}",
            'sort[0][field]': 'Created At',
            'sort[0][direction]': 'desc'
        }
        records = _list_records(AIRTABLE_FEEDBACK_TABLE, params)
        return [_submission_from_record(record) for record in records]

    except Exception as e:
        print(f"Error fetching user feedback from Airtable: {e}")
        return []


def find_user_by_email(email):
    """Look up a user account by email (case-insensitive).

    Returns user dict (including passwordHash) or None if not found.
    """
    if not AIRTABLE_API_KEY:
        print("No Airtable API key configured")
        return None

    try:
        params = {'filterByFormula': f"LOWER({{Email}})={_quote(email.strip().lower())}"}
        records = _list_records(AIRTABLE_USERS_TABLE, params)

        if not records:
            return None

        return _user_from_record(records[0])

    except Exception as e:
        print(f"Error looking up user in Airtable: {e}")
        return None


def find_user_by_id(user_id):
    if not AIRTABLE_API_KEY:
        print("No Airtable API key configured")
        return None

    try:
        params = {'filterByFormula': f"{{User ID}}={_quote(user_id)}"}
        records = _list_records(AIRTABLE_USERS_TABLE, params)

        if not records:
            return None

        return _user_from_record(records[0])

    except Exception as e:
        print(f"Error looking up user in Airtable: {e}")
        return None


# ===================
# WRITE OPERATIONS
# ===================

def create_submission(submission):
    """Create a feedback record.

    Used by Feedback after enrichment.
    Returns the new record ID or None on failure.
    """
    if not AIRTABLE_API_KEY:
        print("No Airtable API key configured")
        return None

    try:
        record_data = {
            'fields': {
                'Submission ID': submission['id'],
                'User ID': submission['userId'],
                'Name': submission.get('name', ''),
                'Email': submission.get('email', ''),
                'Rating': submission['rating'],
                'Review': submission['review'],
                'AI Summary': submission['aiSummary'],
                'Recommended Actions': '\n'.join(submission['recommendedActions']),
                'User Response': submission['userResponse'],
                'Created At': submission['createdAt']
            }
        }

        response = httpx.post(_table_url(AIRTABLE_FEEDBACK_TABLE), headers=_get_headers(), json=record_data, timeout=10.0)
        response.raise_for_status()

        record_id = response.json().get('id')
        print(f"Created feedback {submission['id']} ({submission['rating']}-star)")
        return record_id

    except Exception as e:
        print(f"Error creating feedback in Airtable: {e}")
        return None


def create_user(user_id, email, name, password_hash, role='user'):
    """Create a user account record.

    Returns the created user dict or None on failure.
    """
    if not AIRTABLE_API_KEY:
        print("No Airtable API key configured")
        return None

    try:
        record_data = {
            'fields': {
                'User ID': user_id,
                'Email': email.strip().lower(),
                'Name': name.strip(),
                'Password Hash': password_hash,
                'Role': role
            }
        }

        response = httpx.post(_table_url(AIRTABLE_USERS_TABLE), headers=_get_headers(), json=record_data, timeout=10.0)
        response.raise_for_status()

        print(f"Created user {user_id}")
        return _user_from_record(response.json())

    except Exception as e:
        print(f"Error creating user in Airtable: {e}")
        return None
