"""Outbound email hand-off. No transport is configured, so messages are only logged."""

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


def deliver_review_email(
    *,
    review_id: int,
    to_email: str,
    subject: str,
    body: str,
    cc: Optional[List[str]] = None,
) -> None:
    logger.info(
        "Email transport not configured; review %s to %s (cc=%s) marked sent without delivery",
        review_id,
        to_email,
        ",".join(cc or []) or "-",
    )
    logger.debug("Subject: %s\n%s", subject, body)
