APP_NAME = "Finance Tracker"
APP_WIDTH = 900
APP_HEIGHT = 700
DATA_FILE = "finance_data.json"

ISO_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
DISPLAY_DATETIME_FORMAT = "%Y-%m-%d %H:%M"
AXIS_DATETIME_FORMAT = "%Y-%m-%d\n%H:%M"
DEFAULT_DATE_FORMAT = "YYYY-MM-DD"

# Tooltip shows transaction details only within a day of a point.
TOOLTIP_MAX_DISTANCE_SECONDS = 86400.0

PIE_SEGMENTS = 30

TAB_TRANSACTIONS = "Transactions"
TAB_ANALYTICS = "Analytics"
TAB_SETTINGS = "Settings"

TYPE_COLORS = {
    "Income":  "#4CAF50",
    "Expense": "#F44336",
}
BALANCE_LINE_COLOR = "#ADD8E6"

LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
