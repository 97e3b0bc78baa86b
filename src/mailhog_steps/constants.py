"""Constants for MailHog Steps."""

# --- MailHog API ---
DEFAULT_MESSAGES_ENDPOINT = "http://0.0.0.0:8025/mailhog/api/v2/messages"
FETCH_TIMEOUT = 30  # seconds per messages request
HTML_PART_INDEX = 1  # MailHog puts the HTML alternative in the second MIME part
HTML_CONTENT_TYPE = "text/html"

# --- Environment variables ---
ENDPOINT_ENV_VAR = "MAILHOG_API_URL"
HTML_BY_CONTENT_TYPE_ENV_VAR = "MAILHOG_HTML_BY_CONTENT_TYPE"
BASE_URL_ENV_VAR = "MAILHOG_APP_BASE_URL"
TRUTHY_VALUES = ("1", "true", "yes", "on")

# --- Navigation ---
NAVIGATION_TIMEOUT = 30

# --- Polling ---
POLL_ATTEMPTS = 5
POLL_MIN_WAIT = 1  # seconds
POLL_MAX_WAIT = 10

# --- Assertions ---
VALID_FIELDS = ("from", "subject", "to")
