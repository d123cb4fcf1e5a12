# Environment variables
ENV_BASE_URL = "NEWSAPI_URL"
ENV_API_KEY = "NEWSAPI_KEY"
ENV_AUTH_MODE = "NEWSAPI_AUTH_MODE"

DEFAULT_BASE_URL = "https://newsapi.org/v2/"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_API_KEY = "X-Api-Key"
HEADER_CONTENT_TYPE = "Content-Type"

# Query parameters
QUERY_API_KEY = "apiKey"

# Files
DOTENV_FILE = ".env"

LOGGER_NAME = "newsapi_kit"
