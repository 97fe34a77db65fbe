"""
Database entity models.

Each module holds one listing family: the listing table itself plus the
feature table used for AND-matching feature searches.

Modules:
- chairs: ``chair`` and ``chair_features``
- estates: ``estate`` and ``estate_features``
"""

from . import chairs, estates
from .chairs import Chair, ChairBase, ChairFeature
from .estates import Estate, EstateBase, EstateFeature

__all__ = [
    "Chair",
    "ChairBase",
    "ChairFeature",
    "Estate",
    "EstateBase",
    "EstateFeature",
    "chairs",
    "estates",
]
