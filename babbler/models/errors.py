"""
Exceptions raised by the Markov chain and the text generator.

`UnseenTokenError` is the only error a well-formed generation request can
produce. `MarkovNotImplementedError` is reserved and never raised; callers
catching `MarkovChainError` cover every current and future variant.
"""


class MarkovChainError(Exception):
    """Base class for all chain and generation failures."""


class UnseenTokenError(MarkovChainError):
    """
    Raised when a successor is requested for a token with no outgoing edges.

    Attributes:
        word (str): The token that has never been seen followed by anything.
    """

    def __init__(self, word):
        self.word = word
        super().__init__(f"Token has no recorded successors: {word!r}")

    def __eq__(self, other):
        if not isinstance(other, UnseenTokenError):
            return NotImplemented
        return self.word == other.word

    def __hash__(self):
        return hash((UnseenTokenError, self.word))

    def __reduce__(self):
        return (UnseenTokenError, (self.word,))


class MarkovNotImplementedError(MarkovChainError):
    """Reserved for operations the chain does not support yet."""
