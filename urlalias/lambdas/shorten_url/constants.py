# Log event codes
UNAUTHORIZED = 'UNAUTHORIZED'
INVALID_REQUEST_BODY = 'INVALID_REQUEST_BODY'
STORE_WRITE_FAILED = 'STORE_WRITE_FAILED'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
