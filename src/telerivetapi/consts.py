API_URL = 'https://api.telerivet.com/v1'
USER_AGENT = 'telerivet-api-python/1.0'

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200

ENV_FILE = 'secrets.env'
