import logging
from collections import defaultdict

from babbler.models.errors import UnseenTokenError
from babbler.utils.random_sources import default_uniform_source


class MarkovChain:
    """
    First-order word transition model with counted edges.

    Edges are stored nested under their predecessor so that sampling only
    walks the out-edges of the seed:

    - `transitions[a][b]`: number of times the pair (a, b) was recorded
    - `total_counts[a]`: number of pairs recorded that start with `a`

    After every `record`, `total_counts[a] == sum(transitions[a].values())`,
    every stored edge weight is >= 1 and `total_counts` only holds tokens that
    have at least one outgoing edge.
    """

    def __init__(self, random_source=None, logger=None):
        """
        Initializes an empty chain.

        Args:
            random_source (callable, optional): Zero-argument callable returning
                a float in [0, 1). Defaults to the process-global PRNG.
            logger (Logger, optional): Logger for sampling diagnostics.
        """
        self.transitions = defaultdict(lambda: defaultdict(int))
        self.total_counts = defaultdict(int)
        self.random_source = random_source or default_uniform_source
        self.logger = logger or logging.getLogger(__name__)

    def record(self, current_word, next_word):
        """
        Mark the ordered pair (current_word, next_word) as seen once.

        Self-loops are legal.
        """
        self.transitions[current_word][next_word] += 1
        self.total_counts[current_word] += 1

    def record_sequence(self, words, wrap_around=True):
        """
        Record every adjacent pair of `words`, plus the pair from the last
        word back to the first when `wrap_around` is set.

        Returns:
            int: Number of pairs recorded.
        """
        words = list(words)
        for current_word, next_word in zip(words, words[1:]):
            self.record(current_word, next_word)
        recorded = max(len(words) - 1, 0)

        if wrap_around and words:
            self.record(words[-1], words[0])
            recorded += 1

        return recorded

    def sample(self, seed):
        """
        Draw a successor of `seed`, weighted by how often each was observed.

        The draw `u` from the random source is compared against the running
        sum of `count / total` over the out-edges of `seed` (in insertion
        order); the first successor pushing the sum strictly past `u` wins.
        If rounding leaves the sum just short of `u`, the last successor is
        returned.

        Raises:
            UnseenTokenError: `seed` has no outgoing edges.
            ValueError: The random source returned a value outside [0, 1).
        """
        total = self.total_counts.get(seed, 0)
        if total == 0:
            raise UnseenTokenError(seed)

        draw = self.random_source()
        if not 0.0 <= draw < 1.0:
            raise ValueError(f"Random source returned {draw}, expected a value in [0, 1)")

        cursor = 0.0
        chosen = None
        for next_word, count in self.transitions[seed].items():
            chosen = next_word
            cursor += count / total
            if cursor > draw:
                break

        self.logger.debug("Sampled successor", extra={
            "metrics": {
                "seed": seed,
                "next_word": chosen,
                "draw": draw,
                "out_count": total,
                "residual": cursor <= draw,
            }
        })
        return chosen

    def out_count(self, word):
        """Sum of outgoing edge weights of `word` (0 when unseen)."""
        return self.total_counts.get(word, 0)

    def edge_count(self, current_word, next_word):
        """Weight of the edge (current_word, next_word) (0 when absent)."""
        return self.transitions.get(current_word, {}).get(next_word, 0)

    def successors(self, word):
        """Copy of the successor counts of `word`."""
        return dict(self.transitions.get(word, {}))

    def probabilities(self, word):
        """Transition probabilities out of `word`; empty when unseen."""
        total = self.out_count(word)
        if total == 0:
            return {}
        return {next_word: count / total
                for next_word, count in self.transitions[word].items()}

    def states(self):
        """Tokens with at least one outgoing edge, in first-seen order."""
        return list(self.total_counts)

    def edge_total(self):
        """Number of distinct edges."""
        return sum(len(next_words) for next_words in self.transitions.values())

    def __contains__(self, word):
        return self.out_count(word) > 0

    def __len__(self):
        return len(self.total_counts)

    def __repr__(self):
        return f"MarkovChain(states={len(self)}, edges={self.edge_total()})"
