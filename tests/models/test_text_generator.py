#!/usr/bin/env python3
"""
Tests for corpus ingestion and the generation walk.
"""

import random
from unittest.mock import MagicMock

import pytest
from babbler.models.errors import UnseenTokenError
from babbler.models.text_generator import MarkovTextGenerator, build_chain, generate
from babbler.utils.random_sources import ScriptedUniformSource

LYRICS = (
    "Welcome to the jungle we've got fun and games We got everything you want honey, "
    "we know the names We are the people that can find whatever you may need If you "
    "got the money, honey we got your disease."
)


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing"""
    logger = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.debug = MagicMock()
    return logger


def test_one_word():
    assert generate("hello", "hello", 1) == ["hello"]


def test_two_words():
    assert generate("hello bob", "hello", 2) == ["hello", "bob"]


def test_wrap_around_cycle():
    assert generate("a b c", "a", 4) == ["a", "b", "c", "a"]


def test_single_word_corpus_loops_on_itself():
    assert generate("hello", "hello", 3) == ["hello", "hello", "hello"]


def test_length_zero_returns_nothing():
    assert generate("", "x", 0) == []
    assert generate("a b c", "a", 0) == []


def test_length_one_never_samples():
    source = ScriptedUniformSource([])
    assert generate("", "unseen", 1, random_source=source) == ["unseen"]
    assert source.calls == 0


def test_empty_corpus_fails_on_first_sample():
    with pytest.raises(UnseenTokenError) as excinfo:
        generate("", "x", 2)
    assert excinfo.value == UnseenTokenError("x")


def test_unknown_start_fails():
    with pytest.raises(UnseenTokenError) as excinfo:
        generate("a b", "z", 2)
    assert excinfo.value.word == "z"


def test_start_is_not_normalised():
    # The corpus is lowercased but the start word is used verbatim
    with pytest.raises(UnseenTokenError) as excinfo:
        generate("Hello bob", "Hello", 2)
    assert excinfo.value.word == "Hello"


def test_corpus_is_tokenized_before_ingestion():
    assert generate("Hello, BOB!", "hello", 3) == ["hello", "bob", "hello"]


def test_draws_once_per_sampled_word():
    source = ScriptedUniformSource([0.0] * 9)
    words = generate("a b a c", "a", 10, random_source=source)
    assert len(words) == 10
    assert source.calls == 9


def test_scripted_walk_is_deterministic():
    # a -> b (1), a -> c (1), b -> a, c -> a (wrap-around)
    source = ScriptedUniformSource([0.1, 0.0, 0.9, 0.0])
    assert generate("a b a c", "a", 5, random_source=source) == ["a", "b", "a", "c", "a"]


@pytest.mark.parametrize("length", [-1, -10])
def test_negative_length_rejected(length):
    with pytest.raises(ValueError):
        generate("a b", "a", length)


@pytest.mark.parametrize("length", ["3", 2.0, None, True])
def test_non_integer_length_rejected(length):
    with pytest.raises(TypeError):
        generate("a b", "a", length)


def test_build_chain_records_pairs_and_wrap_around():
    chain = build_chain(["the", "cat", "the", "hat"])
    assert chain.successors("the") == {"cat": 1, "hat": 1}
    assert chain.successors("cat") == {"the": 1}
    assert chain.successors("hat") == {"the": 1}


@pytest.mark.parametrize("seed", range(15))
def test_any_corpus_token_supports_any_length(seed):
    rng = random.Random(seed)
    vocabulary = ["alpha", "beta", "gamma", "delta", "eps"]
    corpus = " ".join(rng.choice(vocabulary) for _ in range(rng.randint(1, 30)))
    start = rng.choice(corpus.split())

    for length in (0, 1, 2, 17):
        words = generate(corpus, start, length, random_source=random.Random(seed).random)
        assert len(words) == length
        if length:
            assert words[0] == start
            assert set(words) <= set(corpus.split())


def test_lyrics_walk_stays_in_vocabulary():
    words = generate(LYRICS, "welcome", 50)
    assert len(words) == 50
    assert words[0] == "welcome"
    assert all(word.isalpha() and word.islower() for word in words)


def test_generator_uses_config_defaults(mock_logger):
    generator = MarkovTextGenerator(
        config={"default_length": 4, "default_start": "a"}, logger=mock_logger)
    assert generator.generate("a b c") == ["a", "b", "c", "a"]


def test_generator_falls_back_to_first_corpus_token(mock_logger):
    generator = MarkovTextGenerator(config={"default_length": 3}, logger=mock_logger)
    assert generator.generate("Hello, bob") == ["hello", "bob", "hello"]


def test_generator_without_start_or_tokens_raises(mock_logger):
    generator = MarkovTextGenerator(logger=mock_logger)
    with pytest.raises(ValueError):
        generator.generate("123 !!!")


def test_generate_text_joins_words(mock_logger):
    generator = MarkovTextGenerator(logger=mock_logger)
    assert generator.generate_text("a b c", start="b", length=3) == "b c a"


def test_generator_logs_start_and_completion(mock_logger):
    generator = MarkovTextGenerator(logger=mock_logger)
    generator.generate("a b c", start="a", length=2)

    messages = [call.args[0] for call in mock_logger.info.call_args_list]
    assert "Text generation started" in messages
    assert "Text generation completed" in messages
    completed = mock_logger.info.call_args_list[-1].kwargs["extra"]["metrics"]
    assert completed["generated"] == 2


def test_generator_logs_and_reraises_failure(mock_logger):
    generator = MarkovTextGenerator(logger=mock_logger)
    with pytest.raises(UnseenTokenError):
        generator.generate("a b", start="z", length=3)

    mock_logger.warning.assert_called_once()
    metrics = mock_logger.warning.call_args.kwargs["extra"]["metrics"]
    assert metrics["error"] == "UnseenTokenError"


def test_generator_seed_is_reproducible(mock_logger):
    config = {"random_seed": 42, "default_length": 30}
    corpus = "the cat sat on the mat and the dog sat on the cat"
    first = MarkovTextGenerator(config=config, logger=mock_logger).generate(corpus, start="the")
    second = MarkovTextGenerator(config=config, logger=mock_logger).generate(corpus, start="the")
    assert first == second


def test_explicit_random_source_wins_over_seed(mock_logger):
    source = ScriptedUniformSource([0.0, 0.0])
    generator = MarkovTextGenerator(
        config={"random_seed": 1}, logger=mock_logger, random_source=source)
    generator.generate("a b c", start="a", length=3)
    assert source.calls == 2


def test_generator_resource_monitoring(mocker, mock_logger):
    monitor_cls = mocker.patch("babbler.models.text_generator.ResourceMonitor")
    monitor = monitor_cls.return_value
    monitor.stop.return_value = 0.5
    monitor.get_resource_usage.return_value = {"threads": 1}

    generator = MarkovTextGenerator(config={"monitor_resources": True}, logger=mock_logger)
    generator.generate("a b c", start="a", length=2)

    monitor_cls.assert_called_once_with(logger=mock_logger)
    monitor.start.assert_called_once_with("markov_generation")
    monitor.stop.assert_called_once()
    completed = mock_logger.info.call_args_list[-1].kwargs["extra"]["metrics"]
    assert completed["duration_seconds"] == 0.5
    assert completed["system"] == {"threads": 1}


def test_generator_stops_monitor_on_failure(mocker, mock_logger):
    monitor_cls = mocker.patch("babbler.models.text_generator.ResourceMonitor")
    generator = MarkovTextGenerator(config={"monitor_resources": True}, logger=mock_logger)

    with pytest.raises(UnseenTokenError):
        generator.generate("", start="x", length=2)

    monitor_cls.return_value.stop.assert_called_once()
