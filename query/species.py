"""Species name normalization, catalog lookup and tournament species codes."""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

from loguru import logger
from rapidfuzz import fuzz, process

VOWELS = frozenset("AEIOU")


def normalize_species(name: Optional[str]) -> str:
    """Stored form of a species name: trimmed, lowercase, single spaces."""
    return re.sub(r"\s+", " ", (name or "").strip()).lower()


def species_code(name: Optional[str]) -> str:
    """Two-letter tournament code used for lane labels and marker types.

    Two or more words take the first letter of the first two words; a single
    word takes its first two consonants. Empty input gives "--".
    """
    words = (name or "").strip().upper().split()
    if not words:
        return "--"
    if len(words) >= 2:
        return words[0][0] + words[1][0]

    chars = list(words[0])
    consonants = [ch for ch in chars if ch not in VOWELS]
    if len(consonants) >= 2:
        return consonants[0] + consonants[1]
    if len(consonants) == 1:
        first = consonants[0]
        second = next((ch for ch in chars if ch != first), first)
        return first + second
    return "".join(chars[:2])


class SpeciesCatalog:
    """Known species with aliases and fuzzy resolution of entered names.

    Resolution strategies, in order:
        1. Exact match on the normalized name or an alias
        2. Space-insensitive match ("large mouth" -> "largemouth")
        3. Fuzzy match above ``threshold`` (rapidfuzz WRatio)

    Usage:
        catalog = SpeciesCatalog(["largemouth", "smallmouth", "walleye"])
        catalog.resolve("Large Mouth")  # -> "largemouth"
    """

    def __init__(
        self,
        species: Iterable[str],
        aliases: Optional[Dict[str, str]] = None,
        threshold: float = 85.0,
    ) -> None:
        self.species: List[str] = []
        for name in species:
            normalized = normalize_species(name)
            if normalized and normalized not in self.species:
                self.species.append(normalized)
        self.aliases = {
            normalize_species(alias): normalize_species(target)
            for alias, target in (aliases or {}).items()
        }
        self.threshold = threshold
        self._compact = {name.replace(" ", ""): name for name in self.species}

    @classmethod
    def from_config(cls, species_data: Dict) -> SpeciesCatalog:
        """Build from the ``species.json`` shape: {"species": [...], "aliases": {...}}."""
        return cls(species_data.get("species", []), species_data.get("aliases", {}))

    def __contains__(self, name: str) -> bool:
        return normalize_species(name) in self.species

    def resolve(self, name: Optional[str]) -> Optional[str]:
        """Catalog name for ``name``, or None when nothing is close enough."""
        normalized = normalize_species(name)
        if not normalized:
            return None
        if normalized in self.species:
            return normalized
        if normalized in self.aliases:
            return self.aliases[normalized]

        compact = normalized.replace(" ", "")
        if compact in self._compact:
            return self._compact[compact]

        if not self.species:
            return None
        best = process.extractOne(normalized, self.species, scorer=fuzz.WRatio)
        if best and best[1] >= self.threshold:
            logger.debug(f"[species] '{normalized}' -> '{best[0]}' (score={best[1]:.1f})")
            return best[0]
        logger.debug(f"[species] No catalog match for '{normalized}'")
        return None

    def normalize_entry(self, name: Optional[str]) -> str:
        """Name to store for a new catch: the catalog name if resolvable, else normalized input."""
        return self.resolve(name) or normalize_species(name)
