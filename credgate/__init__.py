"""Credgate - pluggable JSON credential verification with optional reCAPTCHA."""

__version__ = "0.1.0"
