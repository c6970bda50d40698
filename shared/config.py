# Pulse Shared Config
# Central configuration for all Pulse apps

import os

# Airtable
AIRTABLE_API_KEY = os.environ.get('AIRTABLE_API_KEY')
AIRTABLE_BASE_ID = os.environ.get('AIRTABLE_BASE_ID', 'appPulseFeedback01')

# Table names
AIRTABLE_FEEDBACK_TABLE = os.environ.get('AIRTABLE_FEEDBACK_TABLE', 'Feedback')
AIRTABLE_USERS_TABLE = os.environ.get('AIRTABLE_USERS_TABLE', 'Users')

# Anthropic
ANTHROPIC_API_KEY = os.environ.get('ANTHROPIC_API_KEY')
ANTHROPIC_MODEL = os.environ.get('ANTHROPIC_MODEL', 'claude-sonnet-4-20250514')
GENERATION_MAX_TOKENS = int(os.environ.get('GENERATION_MAX_TOKENS', 500))
GENERATION_TEMPERATURE = float(os.environ.get('GENERATION_TEMPERATURE', 0.4))
GENERATION_TIMEOUT = float(os.environ.get('GENERATION_TIMEOUT', 30.0))

# Auth
JWT_SECRET = os.environ.get('JWT_SECRET', 'change-me-in-production')
JWT_EXPIRY_HOURS = int(os.environ.get('JWT_EXPIRY_HOURS', 24))
ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL', 'admin@pulse.local')
ADMIN_PASSWORD_HASH = os.environ.get('ADMIN_PASSWORD_HASH')

# Feedback limits
REVIEW_MAX_LENGTH = 2000
ADMIN_CONTEXT_LIMIT = int(os.environ.get('ADMIN_CONTEXT_LIMIT', 50))
