from __future__ import annotations

import re
import unicodedata
from typing import Optional
from urllib.parse import urlparse


_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)
# Characters a URL host can never contain
_FORBIDDEN_HOST_CHARS = set("\x00\t\n\r #/:<>?@[\\]^|%\"'`{}")


def normalize(value: Optional[str]) -> str:
    """Trim and lowercase a string for key/equality use; None and '' give ''."""
    if not value:
        return ""
    return str(value).strip().lower()


def _host_is_valid(host: Optional[str]) -> bool:
    if not host:
        return False
    return not any(ch in _FORBIDDEN_HOST_CHARS or ch.isspace() for ch in host)


def extract_domain(url_or_domain: Optional[str]) -> str:
    """Return the host of a URL-like string without a leading 'www.'.

    Strings that do not parse to a usable host fall back to normalize(value),
    so they still take part in equality comparisons.
    """
    if not url_or_domain:
        return ""
    text = str(url_or_domain).strip()
    if not _SCHEME_RE.match(text):
        text = f"https://{text}"
    try:
        host = urlparse(text).hostname
    except ValueError:
        return normalize(url_or_domain)
    if not _host_is_valid(host):
        return normalize(url_or_domain)
    if host.startswith("www."):
        host = host[4:]
    return host


def extract_apex_domain(url_or_domain: Optional[str]) -> Optional[str]:
    if not url_or_domain:
        return None
    try:
        import tldextract
        text = str(url_or_domain).strip().lower()
        if not text.startswith('http://') and not text.startswith('https://'):
            text = f"http://{text}"
        ext = tldextract.extract(text)
        if ext.domain and ext.suffix:
            return f"{ext.domain}.{ext.suffix}"
        return None
    except Exception:
        return None


def collation_key(value: Optional[str]) -> tuple[str, str, str]:
    """Sort key close to a locale-aware comparison.

    Primary level ignores accents and case, so 'Émile' sorts next to 'emile';
    ties fall back to the case-folded text and then put lowercase first.
    """
    text = value or ""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text.casefold(), text.swapcase()
