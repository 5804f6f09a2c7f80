# akamai_watch/tracker/hasher.py
"""Content fingerprint of a script body.

MD5 is enough here: the digest only tells versions apart, it guards nothing.
"""
import hashlib


def script_fingerprint(body: str) -> str:
    """Return the lowercase hex MD5 of *body* encoded as UTF-8."""
    digest = hashlib.md5(body.encode("utf-8"), usedforsecurity=False)
    return digest.hexdigest()
