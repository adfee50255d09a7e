import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Mapping, Optional, Set, Tuple

from marketplace.services.gazetteer_data import GAZETTEER
from marketplace.services.search_types import normalize_term

logger = logging.getLogger(__name__)

# Child group name in the static table -> kind given to leaf children
CHILD_GROUPS: Tuple[Tuple[str, str], ...] = (
    ("regions", "region"),
    ("states", "state"),
    ("emirates", "emirate"),
    ("cities", "city"),
    ("areas", "area"),
)
KINDS = frozenset(kind for _group, kind in CHILD_GROUPS) | {"country"}


class GazetteerError(ValueError):
    """Raised when the static place table violates the tree invariants."""


@dataclass(frozen=True)
class GazetteerEntry:
    key: str
    kind: str
    aliases: FrozenSet[str]
    codes: FrozenSet[str] = frozenset()
    parent: Optional[str] = None
    children: Tuple[str, ...] = ()


class Gazetteer:
    """Immutable place tree. Build with build_gazetteer()."""

    def __init__(self, entries: Mapping[str, GazetteerEntry]):
        self._entries: Dict[str, GazetteerEntry] = dict(entries)
        index: Dict[str, List[str]] = {}
        for entry in self._entries.values():
            for name in entry.aliases | entry.codes:
                index.setdefault(name, []).append(entry.key)
        self._index = {name: tuple(keys) for name, keys in index.items()}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def entry(self, key: str) -> GazetteerEntry:
        return self._entries[key]

    def lookup(self, name: str) -> Tuple[str, ...]:
        """Keys of every entry whose key, alias or code equals name."""
        return self._index.get(name, ())

    def closure(self, key: str) -> Set[str]:
        """Aliases of the entry and of every descendant, never ancestors."""
        names: Set[str] = set()
        stack = [key]
        while stack:
            entry = self._entries[stack.pop()]
            names.update(entry.aliases)
            stack.extend(entry.children)
        return names


def build_gazetteer(table: Mapping[str, Mapping]) -> Gazetteer:
    drafts: Dict[str, dict] = {}
    for raw_key, raw in table.items():
        key = normalize_term(raw_key)
        if key in drafts:
            raise GazetteerError(f"Duplicate gazetteer key '{key}'")
        kind = raw.get("kind")
        if kind not in KINDS:
            raise GazetteerError(f"Unknown kind '{kind}' for '{key}'")
        drafts[key] = {
            "kind": kind,
            "aliases": {key} | {normalize_term(a) for a in raw.get("aliases", [])},
            "codes": {normalize_term(c) for c in raw.get("codes", [])},
            "children": [
                (normalize_term(child), child_kind)
                for group, child_kind in CHILD_GROUPS
                for child in raw.get(group, [])
            ],
            "parent": None,
        }

    declared_names: Dict[str, str] = {}
    for key, draft in drafts.items():
        for name in draft["aliases"] | draft["codes"]:
            if name != key and name in drafts:
                raise GazetteerError(
                    f"Alias '{name}' of '{key}' shadows another gazetteer entry"
                )
            declared_names.setdefault(name, key)

    leaves: Dict[str, dict] = {}
    for key, draft in drafts.items():
        for child, child_kind in draft["children"]:
            if child == key:
                raise GazetteerError(f"'{key}' lists itself as a child")
            if child not in drafts and child not in leaves:
                owner = declared_names.get(child)
                if owner is not None:
                    raise GazetteerError(
                        f"'{key}' lists '{child}', which is only an alias of '{owner}'"
                    )
                leaves[child] = {
                    "kind": child_kind,
                    "aliases": {child},
                    "codes": set(),
                    "children": [],
                    "parent": None,
                }
            target = drafts.get(child) or leaves[child]
            if target["parent"] is not None:
                raise GazetteerError(
                    f"'{child}' is listed under both '{target['parent']}' and '{key}'"
                )
            target["parent"] = key
    drafts.update(leaves)

    for key in drafts:
        seen = {key}
        parent = drafts[key]["parent"]
        while parent is not None:
            if parent in seen:
                raise GazetteerError(f"Containment cycle through '{key}'")
            seen.add(parent)
            parent = drafts[parent]["parent"]

    entries = {
        key: GazetteerEntry(
            key=key,
            kind=draft["kind"],
            aliases=frozenset(draft["aliases"]),
            codes=frozenset(draft["codes"]),
            parent=draft["parent"],
            children=tuple(child for child, _kind in draft["children"]),
        )
        for key, draft in drafts.items()
    }
    return Gazetteer(entries)


class LocationResolver:
    def __init__(self, gazetteer: Optional[Gazetteer] = None):
        self.gazetteer = gazetteer or build_gazetteer(GAZETTEER)
        logger.info(f"Loaded gazetteer with {len(self.gazetteer)} places")

    def expand_location(self, raw: Optional[str]) -> Set[str]:
        """
        Expand a free-text location to every place name it covers.

        Args:
            raw: User supplied location

        Returns:
            Aliases of the matched places and all their descendants, the
            normalized input itself when nothing matches, or an empty set for
            blank input (no location filter)
        """
        location = normalize_term(raw)
        if not location:
            return set()

        keys = self.gazetteer.lookup(location)
        if not keys:
            return {location}

        matches: Set[str] = set()
        for key in keys:
            matches |= self.gazetteer.closure(key)

        logger.debug(f"Location '{location}' expanded to {len(matches)} places")
        return matches


# Global instance for easy access
location_resolver = LocationResolver()
