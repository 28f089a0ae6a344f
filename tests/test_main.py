"""Tests for the composition root and command-line conversation loop."""

import io
import os
from unittest.mock import AsyncMock, MagicMock

import pytest

from street_translator.coordinators import ConversationCoordinator
from street_translator.core import Language
from street_translator.main import build_application, parse_args, run_conversation


@pytest.fixture
def settings(tmp_path):
    settings = MagicMock()
    settings.get_cache_dir.return_value = tmp_path / "cache"
    settings.get_gemini_api_key.return_value = None
    settings.get_gemini_model.return_value = None
    settings.get_mymemory_email.return_value = None
    return settings


class TestBuildApplication:
    """Tests for wiring."""

    def test_providers_are_ordered_mymemory_then_gemini(self, settings):
        app = build_application(settings)
        assert [provider.name for provider in app.resolver.providers] == ["mymemory", "gemini"]

    def test_gemini_is_unavailable_without_key(self, settings):
        app = build_application(settings)
        assert not app.gemini.is_available()

    def test_cache_is_file_backed(self, settings, tmp_path):
        app = build_application(settings)
        app.cache.set("k", "v")
        assert os.listdir(tmp_path / "cache")


class TestParseArgs:
    """Tests for command-line parsing."""

    def test_defaults(self):
        args = parse_args(["Bom", "dia"])
        assert args.text == ["Bom", "dia"]
        assert args.from_lang == "pt-BR"
        assert args.to_lang == "en-US"

    def test_rejects_unsupported_language(self):
        with pytest.raises(SystemExit):
            parse_args(["--to", "fr-FR", "Oi"])

    def test_traveler_cannot_be_vendor_language(self):
        with pytest.raises(SystemExit):
            parse_args(["--interactive", "--traveler", "pt-BR"])


class TestRunConversation:
    """Tests for the interactive loop."""

    @pytest.mark.asyncio
    async def test_lines_are_routed_by_speaker(self):
        resolver = MagicMock()
        resolver.resolve = AsyncMock(side_effect=["Good morning", "Bom dia"])
        coordinator = ConversationCoordinator(resolver, Language.EN_US)
        stdin = io.StringIO("v: Bom dia\nt: Good morning\nx: ???\n/phrase product_beer\n\nv: never\n")
        stdout = io.StringIO()

        await run_conversation(coordinator, stdin, stdout)

        output = stdout.getvalue().splitlines()
        assert output == [
            "[VENDOR] Bom dia -> Good morning",
            "[TOURIST] Good morning -> Bom dia",
            "! Use 'v: <text>' or 't: <text>'",
            "[VENDOR] Cerveja gelada -> Cold beer",
        ]
        assert len(coordinator.transcript) == 3

    @pytest.mark.asyncio
    async def test_reads_stdin_off_the_event_loop(self, monkeypatch):
        coordinator = ConversationCoordinator(MagicMock(), Language.EN_US)
        stdin = io.StringIO("/phrase product_beer\n")
        stdout = io.StringIO()
        to_thread = AsyncMock(side_effect=lambda func: func())
        monkeypatch.setattr("street_translator.main.asyncio.to_thread", to_thread)

        await run_conversation(coordinator, stdin, stdout)

        assert to_thread.await_count == 2
        assert all(call.args == (stdin.readline,) for call in to_thread.await_args_list)
        assert stdout.getvalue() == "[VENDOR] Cerveja gelada -> Cold beer\n"
