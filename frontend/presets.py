"""
Static selections offered by the dashboard views.
"""

from typing import List, Optional, Tuple

from frontend.schemas import CoinInfo

COINS: List[CoinInfo] = [
    CoinInfo(id='bitcoin', name='Bitcoin', symbol='BTC', color='#f7931a'),
    CoinInfo(id='ethereum', name='Ethereum', symbol='ETH', color='#627eea'),
    CoinInfo(id='cardano', name='Cardano', symbol='ADA', color='#0033ad'),
    CoinInfo(id='solana', name='Solana', symbol='SOL', color='#14f195'),
    CoinInfo(id='polkadot', name='Polkadot', symbol='DOT', color='#e6007a'),
    CoinInfo(id='chainlink', name='Chainlink', symbol='LINK', color='#2a5ada'),
]

DEFAULT_COIN_COLOR = '#d4af37'

# Dashboard history windows (label, minutes)
HISTORY_RANGES: List[Tuple[str, int]] = [
    ('15 minutes', 15),
    ('30 minutes', 30),
    ('1 hour', 60),
    ('2 hours', 120),
    ('4 hours', 240),
    ('24 hours', 1440),
]

# Prediction horizons (label, minutes)
HORIZONS: List[Tuple[str, int]] = [
    ('1 hour', 60),
    ('6 hours', 360),
    ('24 hours', 1440),
]

# Top movers page windows (label, minutes)
TOP_MOVER_WINDOWS: List[Tuple[str, int]] = [
    ('1 hour', 60),
    ('6 hours', 360),
    ('24 hours', 1440),
    ('7 days', 10080),
]


def find_coin(coin_id: str) -> Optional[CoinInfo]:
    """Look up the static configuration for a coin id"""
    return next((coin for coin in COINS if coin.id == coin_id), None)
