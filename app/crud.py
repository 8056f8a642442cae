import re

import models
from sqlalchemy.orm import Session

URL_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MIN_URL_ID = -(2**63)
MAX_URL_ID = 2**63 - 1

def parse_url_id(raw: str) -> int | None:
    """Parse a path segment as a signed 64-bit id, or None if it isn't one."""
    if not URL_ID_PATTERN.fullmatch(raw):
        return None
    url_id = int(raw)
    if not MIN_URL_ID <= url_id <= MAX_URL_ID:
        return None
    return url_id

def create_url(db: Session, url: str) -> models.ShortenedUrl:
    short_url = models.ShortenedUrl(url=url)
    db.add(short_url)
    db.commit()
    db.refresh(short_url)
    return short_url

def get_url(db: Session, url_id: int) -> models.ShortenedUrl | None:
    return db.get(models.ShortenedUrl, url_id)
