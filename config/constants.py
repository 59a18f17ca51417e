"""
Centralized constants for the whiteboard math toolkit.
All magic numbers used by core/ and api/ live here.
"""

# ===========================================
# MATH TEXT
# ===========================================
MATH_MAX_VARIABLES = 6                # sidebar shows at most this many
MIN_MATH_LENGTH = 2                   # shorter strings are never math
MAX_TEXT_LENGTH = 20000               # characters accepted per API request

# ===========================================
# BOARD / LASSO
# ===========================================
LASSO_MIN_POINTS = 3                  # fewer points cannot enclose anything
LASSO_SELECTABLE_TYPES = ('draw', 'image')
LASSO_MAX_POINTS = 10000              # points accepted per lasso request
LASSO_MAX_SHAPES = 5000               # shapes accepted per lasso request

# ===========================================
# API / SERVER
# ===========================================
API_RATE_LIMIT = '60/minute'          # per client address
API_VERSION = '1.0.0'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/mathboard.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
