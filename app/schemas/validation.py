"""Input validation helpers with XSS protection"""

from pydantic import BaseModel, Field, field_validator
import html
import re
import bleach

# Free text keeps no markup at all
ALLOWED_TAGS = []

DANGEROUS_PATTERNS = [
    r'<script[^>]*>',
    r'javascript:',
    r'on\w+\s*=',
    r'<iframe',
]


class SafeStringMixin:
    """Mixin for XSS-safe string validation"""

    @staticmethod
    def sanitize_html(value):
        """Remove HTML tags, keeping the text as the client wrote it"""
        if not value:
            return value
        # bleach escapes & < > in what it keeps; only the tags should go
        return html.unescape(bleach.clean(value, tags=ALLOWED_TAGS, strip=True))

    @staticmethod
    def validate_no_script(value):
        """Block common XSS patterns"""
        if not value:
            return value

        for pattern in DANGEROUS_PATTERNS:
            if re.search(pattern, value, re.IGNORECASE):
                raise ValueError("Invalid characters detected")

        return value


class SearchQuerySchema(BaseModel, SafeStringMixin):
    """Validated search text taken from the URL path"""
    query: str = Field(..., min_length=1, max_length=150)

    @field_validator('query')
    @classmethod
    def clean_query(cls, v):
        return cls.validate_no_script(v)
