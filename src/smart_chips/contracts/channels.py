"""
Delivery channels and how many chips each one can show.
"""

from __future__ import annotations

from typing import Dict, Literal

Channel = Literal["web", "whatsapp"]

CHANNEL_LIMITS: Dict[str, int] = {
    "web": 6,
    "whatsapp": 3,
}
