import logging
from typing import Dict, List, Optional, Set

from marketplace.services.search_types import ExpandedTermSet, normalize_term, tokenize
from marketplace.services.synonym_rules import JOB_SYNONYMS

logger = logging.getLogger(__name__)


class SynonymExpander:
    """
    Service for expanding job-title keywords with related terms
    to improve search recall.
    """

    def __init__(self, synonym_groups: Optional[Dict[str, List[str]]] = None):
        groups = JOB_SYNONYMS if synonym_groups is None else synonym_groups
        self.synonym_groups: Dict[str, frozenset] = {
            normalize_term(key): frozenset(normalize_term(s) for s in synonyms)
            for key, synonyms in groups.items()
        }
        logger.info(f"Loaded {len(self.synonym_groups)} synonym groups")

    def expand(self, term: str) -> Set[str]:
        """
        Expand a single term to its closed set of related terms.

        Args:
            term: Raw query token

        Returns:
            The normalized term plus its synonyms, or just the term when unknown
        """
        term = normalize_term(term)
        if not term:
            return set()

        related = {term}
        if term in self.synonym_groups:
            related.update(self.synonym_groups[term])

        # The static table is not fully symmetric; scan every group so that a
        # synonym always surfaces its canonical key.
        for key, synonyms in self.synonym_groups.items():
            if term in synonyms:
                related.add(key)
                related.update(synonyms)

        return related

    def expand_query(self, query: Optional[str]) -> List[ExpandedTermSet]:
        """Tokenize on whitespace and expand every token independently."""
        expansions = []
        for token in tokenize(query):
            expansions.append(
                ExpandedTermSet(
                    original_terms=frozenset([token]),
                    expanded_terms=frozenset(self.expand(token)),
                )
            )

        if expansions:
            logger.debug(
                f"Query '{query}' expanded to "
                f"{sorted(set().union(*(e.expanded_terms for e in expansions)))}"
            )
        return expansions


# Global instance for easy access
synonym_expander = SynonymExpander()
