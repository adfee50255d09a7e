class SearchUnavailableError(Exception):
    """The record store could not answer a search; nothing is returned."""
