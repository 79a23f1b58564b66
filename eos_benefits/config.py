# eos_benefits/config.py

import os
import logging
import logging.config
from typing import Optional

# --- Logging Configuration ---
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
LOGS_DIR = os.getenv("EOS_LOG_DIR", os.path.join(BASE_DIR, "logs"))
LOG_FILE_NAME = "eos_benefits.log"
LOG_FILE_PATH = os.path.join(LOGS_DIR, LOG_FILE_NAME)
LOG_LEVEL = getattr(logging, os.getenv("EOS_LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s'

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': LOG_FORMAT,
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'level': logging.DEBUG,
        },
        'file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'standard',
            'filename': LOG_FILE_PATH,
            'maxBytes': 1024*1024*5,  # 5 MB
            'backupCount': 5,
            'level': logging.INFO,
            'encoding': 'utf-8',
        },
    },
    'loggers': {
        'eos_benefits': {
            'handlers': ['console', 'file'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}


def setup_logging(config: Optional[dict] = None) -> None:
    """Applies LOGGING_CONFIG (or the given dictConfig), creating the logs directory first."""
    if not os.path.exists(LOGS_DIR):
        os.makedirs(LOGS_DIR)
    logging.config.dictConfig(config or LOGGING_CONFIG)


# --- Application Settings ---
DEFAULT_CURRENCY = os.getenv("EOS_CURRENCY", "SAR")

# Total salary -> components split used by manual entry and spreadsheet import
BASIC_SALARY_DIVISOR = "1.35"  # basic = total / 1.35
HOUSING_RATIO_OF_BASIC = "0.25"  # housing = 25% of basic, transport takes the remainder

REPORT_DECIMAL_PLACES = 2
