import hashlib


def mask_email(email: str | None) -> str | None:
    if not email:
        return email
    # pierwsza litera + domena + hash
    local, _, domain = email.partition("@")
    digest = hashlib.sha256(email.lower().encode("utf-8")).hexdigest()[:8]
    return f"{local[:1]}***@{domain}#{digest}"


def shorten_body(body: str | None, max_len: int = 120) -> str | None:
    if body is None:
        return None
    return body if len(body) <= max_len else body[:max_len] + "..."
