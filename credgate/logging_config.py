"""
Logging configuration that keeps credentials out of log output
"""

import logging
import re
from typing import Any, Dict

_SENSITIVE = re.compile(
    r'(?P<key>"?(?:password|secret|recaptcha)"?\s*[:=]\s*)(?P<quote>["\']?)[^"\'&,\s}]+',
    re.IGNORECASE,
)


class CredentialRedactionFilter(logging.Filter):
    """Filter that masks password, secret and recaptcha values in messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _SENSITIVE.sub(r"\g<key>\g<quote>***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True  # Never drop records, only rewrite them


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration with credential redaction."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "credential_redaction": {
                "()": CredentialRedactionFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["credential_redaction"]
            }
        },
        "loggers": {
            "credgate": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "httpx": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        },
        "root": {
            "level": "INFO",
            "handlers": ["default"]
        }
    }
