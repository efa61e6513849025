# Validation errors (1000-1999)
INVALID_COMMAND_NAME = 1001
INVALID_COMMAND_DESCRIPTION = 1002
TOO_MANY_COMMANDS = 1003
INVALID_WEBHOOK_URL = 1004

# Not found errors (2000-2999)
COMMAND_NOT_FOUND = 2001

# Authorization errors (3000-3999)
INVALID_API_KEY = 3001
INVALID_TELEGRAM_AUTH_KEY = 3002

# External service errors (5000-5999)
TELEGRAM_API_UNREACHABLE = 5001
TELEGRAM_API_REJECTED = 5002
TELEGRAM_API_BAD_RESPONSE = 5003

# Configuration errors (7000-7999)
INVALID_TAG_POLICY = 7001
MISSING_BOT_USERNAME = 7002

# Internal errors (8000-8999)
COMMAND_EXECUTION_FAILED = 8001
