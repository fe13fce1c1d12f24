"""IUCN Red List category labels."""

IUCN_STATUS: dict[str, str] = {
    "EX": "Extinct",
    "EW": "Extinct in the Wild",
    "CR": "Critically Endangered",
    "EN": "Endangered",
    "VU": "Vulnerable",
    "NT": "Near Threatened",
    "LC": "Least Concern",
    "DD": "Data Deficient",
    "NE": "Not Evaluated",
}


def iucn_label(code: str) -> str:
    """Human label for a category code, ``"Unknown"`` if unrecognised."""
    return IUCN_STATUS.get(code.strip().upper(), "Unknown")
