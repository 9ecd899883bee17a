import string

# Input files
DOCS_FILE = "docs.txt"
NOISE_WORDS_FILE = "noisewords.txt"

# File names
ANALYTICS_FILE = "analytics.txt"

# Query limits
RESULT_LIMIT = 5
AUTOCOMPLETE_LIMIT = 10

# Documents fetched over HTTP
REQUEST_TIMEOUT = 3  # seconds
HTML_EXTENSIONS = {".html", ".htm"}

# Characters a keyword may consist of
LETTERS = set(string.ascii_letters)

# Keyword pairs for the /test console command
DEFAULT_QUERIES = [
    ("coming", "farts"),
    ("deep", "world"),
    ("sea", "sky"),
]

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
