"""
Configuration constants and environment setup.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# INPUT FORMAT
# =============================================================================

CSV_EXTENSION = ".csv"
CSV_DELIMITER = ","
EXPECTED_COLUMNS = ["EmpID", "ProjectID", "DateFrom", "DateTo"]
NULL_SENTINEL = "NULL"  # Matched case-insensitively in the DateTo column

# Tried in order after ISO 8601 (YYYY-MM-DD)
DATE_FORMATS = [
    fmt.strip()
    for fmt in os.environ.get("DATE_FORMATS", "%Y/%m/%d,%m/%d/%Y,%d.%m.%Y").split(",")
    if fmt.strip()
]

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_REQUESTS = os.environ.get("LOG_REQUESTS", "true").lower() == "true"

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
SHOW_EXCEPTION_DETAILS = (
    os.environ.get("SHOW_EXCEPTION_DETAILS", "false").lower() == "true"
)
MAX_UPLOAD_SIZE_MB = int(os.environ.get("MAX_UPLOAD_SIZE_MB", "10"))
MAX_UPLOAD_SIZE_BYTES = MAX_UPLOAD_SIZE_MB * 1024 * 1024
API_VERSION = "1.0.0"
