PROJECT_NAME = "Ultrashots"
API_V1_STR = "/api/v1"
HEALTH_PATH = "/up"

# Session keys
SESSION_USER_KEY = "user_id"
SESSION_CSRF_KEY = "_token"
SESSION_FLASH_KEY = "_flash"
SESSION_PREVIOUS_URL_KEY = "_previous_url"
SESSION_INTENDED_URL_KEY = "url.intended"

# Page protocol headers
PAGE_HEADER = "X-Inertia"
PAGE_VERSION_HEADER = "X-Inertia-Version"
PAGE_LOCATION_HEADER = "X-Inertia-Location"
PAGE_PARTIAL_COMPONENT_HEADER = "X-Inertia-Partial-Component"
PAGE_PARTIAL_DATA_HEADER = "X-Inertia-Partial-Data"

CSRF_COOKIE = "XSRF-TOKEN"
CSRF_HEADERS = ("X-CSRF-TOKEN", "X-XSRF-TOKEN")

PAGE_EXPIRED_STATUS = 419
PAGE_EXPIRED_MESSAGE = "The page expired, please try again."
