from __future__ import annotations

from dataclasses import dataclass

from core.config import DEFAULT_TOKEN_ID

PREMIUM_SUFFIX = "X"


@dataclass(frozen=True)
class TokenLabels:
    basic: str
    premium: str


def token_labels(token_id: str = DEFAULT_TOKEN_ID) -> TokenLabels:
    """Display names for the basic and premium token; blank ids fall back to TKN."""
    basic = (token_id or "").strip() or DEFAULT_TOKEN_ID
    return TokenLabels(basic=basic, premium=f"{basic}{PREMIUM_SUFFIX}")
