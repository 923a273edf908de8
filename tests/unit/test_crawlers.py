"""Tests for the AI crawler registry and detector."""

import pytest

from visibility.crawlers import AI_CRAWLERS, AIBotDetector, BotPurpose, detect_bot
from visibility.crawlers.bots import get_all_bot_names, get_bots_by_purpose

GPTBOT_UA = "Mozilla/5.0 AppleWebKit/537.36 (KHTML, like Gecko; compatible; GPTBot/1.1; +https://openai.com/gptbot)"
BROWSER_UA = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) AppleWebKit/605.1.15 Safari/605.1.15"


class TestRegistry:
    """Tests for the known crawler registry."""

    def test_registry_size(self):
        assert len(AI_CRAWLERS) == 15
        assert len(set(get_all_bot_names())) == 15

    def test_patterns_are_lowercase(self):
        for bot in AI_CRAWLERS:
            assert bot.user_agent_pattern == bot.user_agent_pattern.lower()

    @pytest.mark.parametrize(
        "user_agent,expected",
        [
            (GPTBOT_UA, "GPTBot"),
            ("Mozilla/5.0 (compatible; ClaudeBot/1.0; +claudebot@anthropic.com)", "ClaudeBot"),
            ("Mozilla/5.0 (compatible; PerplexityBot/1.0)", "PerplexityBot"),
            ("CCBot/2.0 (https://commoncrawl.org/faq/)", "CCBot"),
            ("Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)", "Googlebot"),
        ],
    )
    def test_detect_known(self, user_agent: str, expected: str):
        bot = detect_bot(user_agent)

        assert bot is not None
        assert bot.name == expected

    def test_detect_case_insensitive(self):
        assert detect_bot("GPTBOT") is not None

    @pytest.mark.parametrize("user_agent", [BROWSER_UA, "", None])
    def test_detect_unknown(self, user_agent):
        assert detect_bot(user_agent) is None

    def test_bots_by_purpose(self):
        training = get_bots_by_purpose(BotPurpose.TRAINING)

        assert {bot.name for bot in training} >= {"GPTBot", "ClaudeBot", "CCBot"}
        assert all(bot.purpose == BotPurpose.TRAINING for bot in training)
        assert get_bots_by_purpose("search") == get_bots_by_purpose(BotPurpose.SEARCH)

    def test_to_dict(self):
        assert detect_bot(GPTBOT_UA).to_dict() == {
            "name": "GPTBot",
            "company": "OpenAI",
            "user_agent_pattern": "gptbot",
            "purpose": "training",
        }


class TestAIBotDetector:
    """Tests for the configurable detector."""

    def test_default_detects_registry(self):
        assert AIBotDetector().detect(GPTBOT_UA).name == "GPTBot"

    def test_additional_bots(self):
        detector = AIBotDetector(additional_bots=["MyCustomBot"])

        bot = detector.detect("Mozilla/5.0 (compatible; MyCustomBot/2.0)")

        assert bot is not None
        assert bot.name == "MyCustomBot"
        assert bot.company == "Unknown"
        assert bot.purpose == BotPurpose.UNKNOWN

    def test_ignore_bots(self):
        detector = AIBotDetector(ignore_bots=["GPTBot"])

        assert detector.detect(GPTBOT_UA) is None
        assert detector.detect("ClaudeBot/1.0").name == "ClaudeBot"

    def test_ignore_applies_to_additional_bots(self):
        detector = AIBotDetector(additional_bots=["MyBot"], ignore_bots=["mybot"])

        assert detector.detect("MyBot/1.0") is None

    def test_empty_user_agent(self):
        assert AIBotDetector().detect(None) is None
        assert AIBotDetector().detect("") is None

    def test_bot_names(self):
        names = AIBotDetector(additional_bots=["MyBot"]).get_bot_names()

        assert names[-1] == "MyBot"
        assert len(names) == 16
