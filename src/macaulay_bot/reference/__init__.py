"""Static reference data.

Species lists (loaded from CSV), IUCN labels, and the sampling bias sets.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from macaulay_bot.reference.bias import MAX_REROLLS as MAX_REROLLS
from macaulay_bot.reference.bias import OVERREPRESENTED_FAMILIES as OVERREPRESENTED_FAMILIES
from macaulay_bot.reference.bias import OVERREPRESENTED_ORDERS as OVERREPRESENTED_ORDERS
from macaulay_bot.reference.iucn import IUCN_STATUS as IUCN_STATUS
from macaulay_bot.reference.iucn import iucn_label as iucn_label
from macaulay_bot.reference.records import BirdRecord as BirdRecord
from macaulay_bot.reference.records import MammalRecord as MammalRecord
from macaulay_bot.reference.records import ReferenceDataError as ReferenceDataError
from macaulay_bot.reference.records import find_bird as find_bird
from macaulay_bot.reference.records import find_mammal as find_mammal
from macaulay_bot.reference.records import load_birds as load_birds
from macaulay_bot.reference.records import load_mammals as load_mammals
