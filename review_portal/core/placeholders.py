from typing import Mapping

from review_portal.core.enums import Placeholder

FEEDBACK_FOOTER = "\n\nFeedback: {link}"


def render_placeholders(text: str, values: Mapping[str, str]) -> str:
    """Literal token replacement. Tokens without a value are left as-is."""
    out = text
    for token, value in values.items():
        out = out.replace(token, value)
    return out


def build_feedback_link(base_url: str, review_id: int) -> str:
    return f"{(base_url or '').rstrip('/')}/feedback/{review_id}"


def inject_feedback_link(body: str, link: str) -> str:
    """Replace every {{feedback_link}} token; append a footer when the body has none."""
    token = Placeholder.FEEDBACK_LINK.value
    if token in body:
        return body.replace(token, link)
    return body + FEEDBACK_FOOTER.format(link=link)
