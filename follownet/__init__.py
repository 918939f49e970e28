"""
Bounded social network with follow recommendations and popularity queries
"""

from .network import Network
from .outcome import Outcome
from .user import User

__all__ = ['Network', 'Outcome', 'User']
