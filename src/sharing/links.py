"""Share Link Generator.

``build_share_url`` is pure: it only formats URLs from the order data. Any
failure while building returns an empty string, which callers must treat as
"could not generate".
"""

from enum import Enum
from urllib.parse import quote

from sharing.domain import logger

DEFAULT_BASE_URL = "https://buynothing.com"

# Characters encodeURIComponent leaves alone; browsers expect the same encoding.
_URI_COMPONENT_SAFE = "-_.!~*'()"


class SharePlatform(Enum):
    FACEBOOK = "facebook"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    WHATSAPP = "whatsapp"
    INSTAGRAM = "instagram"

    @classmethod
    def parse(cls, value: str) -> "SharePlatform":
        """Map a client-supplied platform name to a platform. Unknown names become FACEBOOK."""
        normalized = (value or "").strip().lower()
        if normalized == "x":
            return cls.TWITTER
        try:
            return cls(normalized)
        except ValueError:
            return cls.FACEBOOK


def _encode(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def share_message(order_number: str, amount) -> str:
    return (
        f"I just bought {amount} worth of absolutely nothing from buyNothing.com! "
        f"🎯 Order #{order_number} - achieving peak minimalism! 💫"
    )


def build_share_url(order_number: str, platform: str, order, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build the social-share URL for ``order`` on ``platform``.

    ``order`` only needs an ``amount`` attribute.
    """
    try:
        logger.info("Generating share URL", order_number=order_number, platform=platform)
        message = _encode(share_message(order_number, order.amount))
        url = _encode(f"{base_url}?ref={order_number}")

        target = SharePlatform.parse(platform)
        if target is SharePlatform.TWITTER:
            return f"https://twitter.com/intent/tweet?text={message}&url={url}&hashtags=buynothing,minimalism,nothing"
        elif target is SharePlatform.LINKEDIN:
            return f"https://www.linkedin.com/sharing/share-offsite/?url={url}&summary={message}"
        elif target is SharePlatform.WHATSAPP:
            return f"https://wa.me/?text={message}%20{url}"
        elif target is SharePlatform.INSTAGRAM:
            return f"https://www.instagram.com/?url={url}"
        else:
            return f"https://www.facebook.com/sharer/sharer.php?u={url}&quote={message}"
    except Exception as exc:
        logger.error("Error generating share URL", order_number=order_number, platform=platform, exc_info=exc)
        return ""
