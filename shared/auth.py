# Pulse Shared Auth
# JWT bearer tokens and route guards for Pulse apps

import hmac
from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt
from flask import g, jsonify, request
from werkzeug.security import check_password_hash, generate_password_hash

from . import config
from .airtable import find_user_by_id

JWT_ALGORITHM = 'HS256'
ADMIN_USER_ID = 'admin-1'


class AuthError(Exception):
    """Authentication or authorisation failure with an HTTP status"""

    def __init__(self, message, status=401):
        self.message = message
        self.status = status
        super().__init__(message)


def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, password_hash):
    if not password_hash:
        return False
    return check_password_hash(password_hash, password)


def verify_admin_credentials(email, password):
    """Check a login against ADMIN_EMAIL / ADMIN_PASSWORD_HASH"""
    if not config.ADMIN_PASSWORD_HASH:
        print("No admin password configured")
        return False
    if not isinstance(email, str) or not isinstance(password, str):
        return False
    email_ok = hmac.compare_digest(
        email.strip().lower().encode('utf-8'),
        config.ADMIN_EMAIL.lower().encode('utf-8')
    )
    return email_ok and verify_password(password, config.ADMIN_PASSWORD_HASH)


def admin_user():
    return {
        'id': ADMIN_USER_ID,
        'email': config.ADMIN_EMAIL,
        'name': 'Admin',
        'role': 'admin'
    }


def public_user(user):
    """User fields safe to return to clients"""
    return {
        'id': user['id'],
        'email': user['email'],
        'name': user['name'],
        'role': user['role']
    }


def issue_token(user):
    now = datetime.now(timezone.utc)
    claims = {
        'id': user['id'],
        'email': user['email'],
        'role': user['role'],
        'iat': now,
        'exp': now + timedelta(hours=config.JWT_EXPIRY_HOURS)
    }
    return jwt.encode(claims, config.JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token):
    try:
        return jwt.decode(token, config.JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthError('Token expired')
    except jwt.InvalidTokenError:
        raise AuthError('Invalid token')


def _bearer_token():
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        raise AuthError('No token provided')
    return token.strip()


def _error_response(e):
    return jsonify({'success': False, 'error': e.message}), e.status


def require_auth(view):
    """Require a valid user token. Sets g.user to the stored user."""
    @wraps(view)
    def wrapped(*args, **kwargs):
        try:
            claims = decode_token(_bearer_token())
            user = find_user_by_id(claims.get('id'))
            if not user:
                raise AuthError('User not found')
        except AuthError as e:
            return _error_response(e)
        g.user = user
        return view(*args, **kwargs)
    return wrapped


def require_admin(view):
    """Require a valid admin token. Sets g.user to the admin user."""
    @wraps(view)
    def wrapped(*args, **kwargs):
        try:
            claims = decode_token(_bearer_token())
            if claims.get('role') != 'admin' or claims.get('id') != ADMIN_USER_ID:
                raise AuthError('Admin access required', status=403)
        except AuthError as e:
            return _error_response(e)
        g.user = admin_user()
        return view(*args, **kwargs)
    return wrapped
