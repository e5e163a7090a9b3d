"""Tests for the WordScramble orchestrator (the presentation boundary)."""

import json
import threading

import pytest
from pydantic import ValidationError

from wordscramble.environment import WordScramble, GameConfig, WordListError, LLMOracle, build_oracle
from wordscramble.environment.models import OracleConfig
from wordscramble.verifiers import WordListOracle, WordfreqOracle


@pytest.fixture
def oracle():
    return WordListOracle(["fan", "can", "face", "race", "care", "acre", "bob", "ebony"])


@pytest.fixture
def game(oracle):
    return WordScramble.create(oracle=oracle, pool=["france"])


class TestCreate:
    """Test cases for session creation."""

    def test_first_game_started(self, game):
        assert game.current_root_word() == "france"
        assert game.current_used_words() == []
        assert game.current_score() == 0
        assert game.games_played == 1
        assert game.started_at is not None

    def test_default_config_uses_bundled_assets(self):
        """Without overrides, root words and lexicon come from the package."""
        game = WordScramble.create(seed=3)
        assert game.current_root_word() in game.pool
        assert isinstance(game.oracle, WordfreqOracle)

    def test_config_has_no_language(self):
        """Words are always checked as English."""
        assert "language" not in GameConfig.model_fields
        config = GameConfig.model_validate({"seed": 1})
        assert not hasattr(config, "language")

    def test_seed_is_reproducible(self, oracle):
        pool = ["alpha", "bravo", "charlie", "delta", "echo"]
        first = WordScramble.create(oracle=oracle, pool=pool, seed=7)
        second = WordScramble.create(oracle=oracle, pool=pool, seed=7)
        assert first.current_root_word() == second.current_root_word()

    def test_missing_start_words_is_fatal(self, oracle, tmp_path):
        config = GameConfig(start_words=str(tmp_path / "missing.txt"))
        with pytest.raises(WordListError):
            WordScramble.create(config=config, oracle=oracle)

    def test_missing_lexicon_is_fatal(self, tmp_path):
        config = GameConfig(oracle=OracleConfig(type="wordlist", path=str(tmp_path / "missing.txt")))
        with pytest.raises(WordListError):
            WordScramble.create(config=config, pool=["france"])

    def test_wordlist_without_path_is_fatal(self):
        config = GameConfig(oracle=OracleConfig(type="wordlist"))
        with pytest.raises(WordListError):
            WordScramble.create(config=config, pool=["france"])

    def test_config_and_kwargs_together(self, oracle):
        """Config parameters are not silently dropped next to a GameConfig."""
        with pytest.raises(ValueError, match="seed"):
            WordScramble.create(config=GameConfig(), oracle=oracle, pool=["france"], seed=7)

    def test_direct_construction_has_a_dictionary(self):
        """A session built without create() still checks words."""
        game = WordScramble(pool=["silkworm"])
        game.on_new_game()
        assert isinstance(game.oracle, WordfreqOracle)
        assert game.on_submit("silk").is_accepted
        assert game.on_submit("xqzt").is_rejected

    def test_oracle_must_be_an_oracle(self):
        with pytest.raises(ValidationError):
            WordScramble(oracle=None, pool=["france"])


class TestBuildOracle:
    """Test cases for oracle construction from config."""

    def test_default_is_wordfreq(self):
        oracle = build_oracle(OracleConfig(min_zipf=2.0))
        assert isinstance(oracle, WordfreqOracle)
        assert oracle.min_zipf == 2.0

    def test_wordlist_oracle(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("fan\n", encoding="utf-8")
        oracle = build_oracle(OracleConfig(type="wordlist", path=str(path)))
        assert isinstance(oracle, WordListOracle)
        assert oracle.is_real_word("fan")

    def test_llm_oracle(self):
        """Extra config keys are passed through to the LLM oracle."""
        config = OracleConfig(type="llm", model="gpt-5-nano", temperature=0.2, top_p=0.9)
        oracle = build_oracle(config)
        assert isinstance(oracle, LLMOracle)
        assert oracle.model == "gpt-5-nano"
        assert oracle.temperature == 0.2
        assert oracle.additional_params["top_p"] == 0.9


class TestOnSubmit:
    """Test cases for submitting words."""

    def test_accepted_word_recorded(self, game):
        """Scenario: root france, fan accepted, score 8."""
        decision = game.on_submit("fan")
        assert decision.is_accepted
        assert game.current_used_words() == ["fan"]
        assert game.current_score() == 8

    def test_most_recent_first(self, game):
        game.on_submit("fan")
        game.on_submit("face")
        assert game.current_used_words() == ["face", "fan"]
        assert game.current_score() == 8 + 9

    def test_raw_input_normalized(self, game):
        decision = game.on_submit("  FAN\n")
        assert decision.is_accepted
        assert game.current_used_words() == ["fan"]

    def test_second_submission_already_used(self, game):
        assert game.on_submit("fan").is_accepted
        decision = game.on_submit("fan")
        assert decision.code == "ALREADY_USED"
        assert game.current_used_words() == ["fan"]

    def test_root_word_rejected(self, game):
        assert game.on_submit("france").code == "SAME_AS_ROOT"

    def test_rejection_does_not_mutate(self, game):
        """Rejected submissions leave root word and used words unchanged."""
        game.on_submit("fan")
        before = (game.current_root_word(), game.current_used_words())
        for raw in ["an", "france", "fan", "xyz", "nac"]:
            assert game.on_submit(raw).is_rejected
        assert (game.current_root_word(), game.current_used_words()) == before

    def test_empty_input_is_silent(self, game):
        """Empty input is neither recorded nor counted as a turn."""
        decision = game.on_submit("   ")
        assert decision.is_empty
        assert game.turn_history == []

    def test_turn_history(self, game):
        game.on_submit("fan")
        game.on_submit("an")
        assert [t.turn_number for t in game.turn_history] == [1, 2]
        assert game.turn_history[0].accepted is True
        assert game.turn_history[0].score_after == 8
        assert game.turn_history[1].decision.code == "TOO_SHORT"
        assert game.turn_history[1].raw_input == "an"

    def test_returned_used_words_are_a_copy(self, game):
        game.on_submit("fan")
        words = game.current_used_words()
        words.append("zzz")
        assert game.current_used_words() == ["fan"]


class SlowOracle:
    """Oracle whose first lookup blocks until released."""

    def __init__(self):
        self.entered = threading.Event()
        self.release = threading.Event()
        self.calls = 0

    def is_real_word(self, word, language="en"):
        self.calls += 1
        self.entered.set()
        self.release.wait(timeout=5)
        return True


class TestConcurrentSubmissions:
    """Validate-then-record is atomic."""

    def test_same_word_from_two_threads(self):
        """Only one of two simultaneous submissions of a word is accepted."""
        oracle = SlowOracle()
        game = WordScramble.create(oracle=oracle, pool=["france"])
        decisions = []

        def submit():
            decisions.append(game.on_submit("fan"))

        first = threading.Thread(target=submit)
        second = threading.Thread(target=submit)
        first.start()
        assert oracle.entered.wait(timeout=5)
        second.start()
        second.join(timeout=0.2)
        assert second.is_alive()  # waiting for the first submission to finish
        oracle.release.set()
        first.join(timeout=5)
        second.join(timeout=5)

        assert sorted(d.status for d in decisions) == ["accepted", "rejected"]
        assert [d.code for d in decisions if d.is_rejected] == ["ALREADY_USED"]
        assert game.current_used_words() == ["fan"]
        assert oracle.calls == 1


class TestOnNewGame:
    """Test cases for starting a new game."""

    def test_clears_used_words(self, oracle):
        game = WordScramble.create(oracle=oracle, pool=["france"])
        game.on_submit("fan")
        game.on_submit("can")
        game.on_new_game()
        assert game.current_used_words() == []
        assert game.current_score() == 0
        assert game.games_played == 2

    def test_word_usable_again_after_new_game(self, oracle):
        game = WordScramble.create(oracle=oracle, pool=["france"])
        game.on_submit("fan")
        game.on_new_game()
        assert game.on_submit("fan").is_accepted


class TestResults:
    """Test cases for result snapshots."""

    def test_get_result(self, game):
        game.on_submit("fan")
        game.on_submit("an")
        game.on_submit("xyz")
        result = game.get_result()
        assert result.root_word == "france"
        assert result.used_words == ["fan"]
        assert result.score == 8
        assert result.total_turns == 3
        assert result.accepted_count == 1
        assert result.rejection_counts == {"TOO_SHORT": 1, "IMPOSSIBLE_LETTERS": 1}

    def test_save_result(self, game, tmp_path):
        game.on_submit("fan")
        path = tmp_path / "results" / "run.json"
        game.save_result(path)

        data = json.loads(path.read_text())
        assert data["root_word"] == "france"
        assert data["used_words"] == ["fan"]
        assert data["turn_history"][0]["decision"]["status"] == "accepted"

    def test_get_state(self, game):
        game.on_submit("fan")
        state = game.get_state()
        assert state["games_played"] == 1
        assert state["num_turns_recorded"] == 1
        assert state["game_state"]["score"] == 8
