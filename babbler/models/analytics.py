import math
import logging
import statistics

import numpy as np


class MarkovChainAnalytics:
    """
    Statistics and scoring helpers for a trained MarkovChain.

    All numbers are derived from the chain's counts; nothing is cached, so the
    analytics stay correct if the chain is still being filled.
    """

    def __init__(self, markov_chain, logger=None):
        """
        Args:
            markov_chain: A populated MarkovChain instance
            logger: Logger for analytics activity
        """
        self.markov_chain = markov_chain
        self.logger = logger or logging.getLogger(__name__)

    def analyze_model(self):
        """
        Summarise the shape of the chain.

        Returns:
            dict: Statistics including:
                - states_count: tokens with outgoing edges
                - transitions_count: distinct edges
                - observations_count: total recorded pairs
                - vocabulary_size: distinct tokens on either end of an edge
                - top_transitions: the 5 heaviest edges
                - avg_transitions_per_state: distinct successors per state
                - state_count_distribution: min/max/avg/median out counts
        """
        chain = self.markov_chain
        states = chain.states()

        all_transitions = []
        vocabulary = set(states)
        for state in states:
            for next_word, count in chain.successors(state).items():
                all_transitions.append((state, next_word, count))
                vocabulary.add(next_word)

        top_transitions = sorted(all_transitions, key=lambda x: x[2], reverse=True)[:5]

        stats = {
            "states_count": len(states),
            "transitions_count": len(all_transitions),
            "observations_count": sum(count for _, _, count in all_transitions),
            "vocabulary_size": len(vocabulary),
            "top_transitions": [
                {"state": state, "next_word": next_word, "count": count}
                for state, next_word, count in top_transitions
            ],
        }

        if states:
            counts = [chain.out_count(state) for state in states]
            stats["avg_transitions_per_state"] = len(all_transitions) / len(states)
            stats["state_count_distribution"] = {
                "min": min(counts),
                "max": max(counts),
                "avg": sum(counts) / len(counts),
                "median": statistics.median(counts),
            }
        else:
            stats["avg_transitions_per_state"] = 0
            stats["state_count_distribution"] = {"min": 0, "max": 0, "avg": 0, "median": 0}

        self.logger.info("Model analysis completed", extra={"metrics": stats})
        return stats

    def get_transition_probability(self, current_word, next_word):
        """Probability of moving from `current_word` to `next_word`."""
        total = self.markov_chain.out_count(current_word)
        if total == 0:
            return 0.0
        return self.markov_chain.edge_count(current_word, next_word) / total

    def transition_matrix(self):
        """
        Dense row-stochastic transition matrix.

        Returns:
            tuple: (vocabulary, matrix) where `vocabulary` is a sorted list of
            tokens and `matrix[i, j]` is the probability of vocabulary[j]
            following vocabulary[i]. Rows of tokens without successors are 0.
        """
        chain = self.markov_chain
        vocabulary = set(chain.states())
        for state in chain.states():
            vocabulary.update(chain.successors(state))
        vocabulary = sorted(vocabulary)
        index = {word: i for i, word in enumerate(vocabulary)}

        matrix = np.zeros((len(vocabulary), len(vocabulary)), dtype=np.float64)
        for state in chain.states():
            total = chain.out_count(state)
            for next_word, count in chain.successors(state).items():
                matrix[index[state], index[next_word]] = count / total

        return vocabulary, matrix

    def score_sequence(self, words):
        """
        Log probability of the transitions in `words`.

        Returns:
            float: Sum of natural-log transition probabilities, 0.0 for fewer
            than two words, `-inf` if any transition was never observed.
        """
        words = list(words)
        score = 0.0
        for current_word, next_word in zip(words, words[1:]):
            prob = self.get_transition_probability(current_word, next_word)
            if prob == 0.0:
                return -math.inf
            score += math.log(prob)
        return score

    def perplexity(self, words):
        """
        Per-transition perplexity of `words` under the chain.

        Returns:
            float: `inf` when a transition is unseen.

        Raises:
            ValueError: Fewer than two words, so there is nothing to score.
        """
        words = list(words)
        if len(words) < 2:
            raise ValueError("Perplexity needs at least two words")
        score = self.score_sequence(words)
        if score == -math.inf:
            return math.inf
        return math.exp(-score / (len(words) - 1))
