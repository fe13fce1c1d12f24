"""Mammal groups that dominate the species list but rarely have photos.

Rodents, shrews and bats make up a large share of described mammal species,
so a uniform draw lands on them far more often than the Macaulay Library can
supply species-specific photos for them.
"""

OVERREPRESENTED_FAMILIES: frozenset[str] = frozenset({"Muridae", "Soricidae"})
OVERREPRESENTED_ORDERS: frozenset[str] = frozenset({"Chiroptera"})

# Redraws allowed before an overrepresented draw is accepted anyway.
MAX_REROLLS: int = 2
