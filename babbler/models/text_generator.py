"""
Markov Chain Text Generator

Builds a word-level Markov chain from a corpus and walks it to produce a
sequence of words.

Functions:
    - build_chain: Records the adjacent pairs of a token list plus the
      wrap-around pair from the last token to the first.
    - generate: Tokenizes a corpus, builds a fresh chain and walks it from a
      caller-supplied start word.

Classes:
    - MarkovTextGenerator: `generate` with defaults taken from the YAML
      configuration, logging and optional resource monitoring.

Example:
    >>> generate("a b c", "a", 4)
    ['a', 'b', 'c', 'a']

Notes:
    - The wrap-around pair means every corpus token has at least one successor,
      so a walk started from any corpus token never dead-ends.
    - `length` counts the start word: `length=1` returns `[start]` without
      sampling and `length=0` returns `[]`.
    - The chain is rebuilt on every call; nothing is cached between calls.
"""

import logging

from babbler.models.markov_chain import MarkovChain
from babbler.nlps.text_preprocessor import tokenize
from babbler.utils.random_sources import seeded_uniform_source
from babbler.utils.system_monitoring import ResourceMonitor


def _check_length(length):
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an integer, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")


def build_chain(tokens, random_source=None, logger=None):
    """
    Build a chain from an already tokenized corpus.

    Args:
        tokens (list): Token sequence in corpus order
        random_source (callable, optional): Draw function handed to the chain
        logger (Logger, optional): Logger handed to the chain

    Returns:
        MarkovChain: The populated chain
    """
    chain = MarkovChain(random_source=random_source, logger=logger)
    chain.record_sequence(tokens, wrap_around=True)
    return chain


def generate(corpus, start, length, random_source=None, logger=None):
    """
    Generate `length` words starting from `start`.

    Args:
        corpus (str or bytes): Training text
        start (str): First emitted word, used verbatim as the first lookup key
        length (int): Number of words to return, including `start`
        random_source (callable, optional): Zero-argument callable returning
            floats in [0, 1)
        logger (Logger, optional): Logger for diagnostics

    Returns:
        list: The generated words

    Raises:
        UnseenTokenError: The walk reached a word with no recorded successor.
            No partial output is returned.
        TypeError, ValueError: `length` is not a non-negative integer.
    """
    _check_length(length)
    logger = logger or logging.getLogger(__name__)

    tokens = tokenize(corpus)
    chain = build_chain(tokens, random_source=random_source, logger=logger)

    if length == 0:
        return []

    output = [start]
    word = start
    for _ in range(1, length):
        word = chain.sample(word)
        output.append(word)

    return output


class MarkovTextGenerator:
    """
    Configured front end for `generate`.

    Defaults for the start word and length come from the generator
    configuration (see `babbler.utils.config_loader`).
    """

    def __init__(self, config=None, logger=None, random_source=None):
        """
        Args:
            config (dict, optional): Loaded generator configuration
            logger (Logger, optional): Logger for generation activity
            random_source (callable, optional): Overrides `random_seed`
        """
        self.config = dict(config or {})
        self.logger = logger or logging.getLogger(__name__)

        seed = self.config.get("random_seed")
        if random_source is None and seed is not None:
            random_source = seeded_uniform_source(seed)
        self.random_source = random_source

        self.resource_monitor = None
        if self.config.get("monitor_resources"):
            self.resource_monitor = ResourceMonitor(logger=self.logger)

    def generate(self, corpus, start=None, length=None):
        """
        Generate words from `corpus`.

        Args:
            corpus (str or bytes): Training text
            start (str, optional): Start word; defaults to `default_start`,
                then to the first corpus token
            length (int, optional): Defaults to `default_length`

        Returns:
            list: The generated words
        """
        if length is None:
            length = self.config.get("default_length", 50)
        if start is None:
            start = self.config.get("default_start")
        if start is None:
            tokens = tokenize(corpus)
            if not tokens:
                raise ValueError("No start word given and the corpus has no tokens")
            start = tokens[0]

        self.logger.info("Text generation started", extra={
            "metrics": {"start": start, "length": length, "corpus_chars": len(corpus or "")}
        })
        if self.resource_monitor:
            self.resource_monitor.start("markov_generation")

        try:
            words = generate(corpus, start, length,
                             random_source=self.random_source, logger=self.logger)
        except Exception as e:
            self.logger.warning(f"Text generation failed: {e}", extra={
                "metrics": {"start": start, "length": length, "error": type(e).__name__}
            })
            raise
        finally:
            if self.resource_monitor:
                duration = self.resource_monitor.stop()

        metrics = {"start": start, "length": length, "generated": len(words)}
        if self.resource_monitor:
            metrics["duration_seconds"] = duration
            metrics["system"] = self.resource_monitor.get_resource_usage()
        self.logger.info("Text generation completed", extra={"metrics": metrics})
        return words

    def generate_text(self, corpus, start=None, length=None):
        """Like `generate`, joined into one space-separated string."""
        return " ".join(self.generate(corpus, start=start, length=length))
