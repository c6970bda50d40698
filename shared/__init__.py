# Pulse Shared Module
# Common functions used across all Pulse apps

from .config import (
    ANTHROPIC_API_KEY,
    ANTHROPIC_MODEL,
    REVIEW_MAX_LENGTH
)

from .helpers import (
    strip_markdown_fences,
    generate_submission_id,
    generate_user_id,
    utc_now_iso,
    format_date_display
)

from .models import (
    FeedbackInput,
    EnrichmentResult,
    Success,
    Failure,
    ValidationError
)

from .gibberish import is_gibberish

from .generation import (
    GenerationClient,
    ProviderError,
    get_default_client
)

from .parsing import (
    parse_text,
    parse_actions
)

from .enrichment import enrich

from .insights import (
    answer_admin_query,
    rating_breakdown
)

from .airtable import (
    get_all_submissions,
    get_submissions_for_user,
    find_user_by_email,
    find_user_by_id,
    create_submission,
    create_user
)

from .auth import (
    AuthError,
    require_auth,
    require_admin,
    issue_token,
    hash_password,
    verify_password,
    verify_admin_credentials,
    admin_user,
    public_user
)
