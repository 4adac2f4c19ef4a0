# Log event codes
MISSING_SHORT_URL = 'MISSING_SHORT_URL'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
SHORT_URL_EXPIRED = 'SHORT_URL_EXPIRED'
STORE_READ_FAILED = 'STORE_READ_FAILED'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
