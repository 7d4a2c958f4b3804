"""
Utility modules for the chip engine
"""
from .formatting import fixed, percent, plain_number, price_label, round_half_up
from .settings import Settings, load_settings

__all__ = [
    'fixed',
    'percent',
    'plain_number',
    'price_label',
    'round_half_up',
    'Settings',
    'load_settings',
]
