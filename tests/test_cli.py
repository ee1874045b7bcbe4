"""tests/test_cli.py — command-line entry point."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

import cli
from conversation.reply_service import ClaudeReplyService

CONTEXT = {
    "name": "Dave",
    "style_context": [
        {
            "messages": [
                {"speaker_id": 0, "text": "omg heyyyyyyy!"},
                {"speaker_id": 1, "text": "woahhhh heyyyyy!! whats up????"},
            ]
        }
    ],
    "conversation_context": {
        "messages": [
            {"speaker_id": 0, "text": "omg youre sooooo cool!"},
            {"speaker_id": 1, "text": "nooooo! youre cool!"},
        ]
    },
}


@pytest.fixture
def context_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    path = tmp_path / "context.json"
    path.write_text(json.dumps(CONTEXT), encoding="utf-8")
    return path


class TestCli:
    def test_no_command_prints_help(self, context_file, capsys):
        assert cli.main([]) == 0
        assert "prompt" in capsys.readouterr().out

    def test_prompt(self, context_file, capsys):
        assert cli.main(["prompt", str(context_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Your name is Dave. ")
        assert out.endswith("Person 1: nooooo! youre cool!\n")

    def test_prompt_name_override(self, context_file, capsys):
        assert cli.main(["prompt", str(context_file), "--name", "Eve"]) == 0
        assert capsys.readouterr().out.startswith("Your name is Eve. ")

    def test_prompt_missing_file(self, context_file):
        assert cli.main(["prompt", "nope.json"]) == 1

    def test_prompt_invalid_context(self, context_file):
        context_file.write_text(
            json.dumps({"style_context": [{"messages": [{"speaker_id": 0}]}]}),
            encoding="utf-8",
        )
        assert cli.main(["prompt", str(context_file)]) == 1

    def test_prompt_missing_conversation_context(self, context_file):
        data = dict(CONTEXT)
        del data["conversation_context"]
        context_file.write_text(json.dumps(data), encoding="utf-8")
        assert cli.main(["prompt", str(context_file)]) == 1

    @pytest.mark.parametrize(
        "document",
        [
            [],
            {"style_context": None},
            {"name": {"x": 1}, "style_context": CONTEXT["style_context"]},
        ],
    )
    def test_prompt_malformed_document(self, context_file, capsys, document):
        context_file.write_text(json.dumps(document), encoding="utf-8")
        assert cli.main(["prompt", str(context_file)]) == 1
        assert "Invalid context file" in capsys.readouterr().out

    def test_invalid_settings(self, context_file, monkeypatch, capsys):
        monkeypatch.setenv("MAX_TOKENS", "abc")
        assert cli.main(["prompt", str(context_file)]) == 1
        assert "Invalid settings" in capsys.readouterr().out

    def test_reply_requires_api_key(self, context_file, monkeypatch):
        send = AsyncMock(return_value="unused")
        monkeypatch.setattr(ClaudeReplyService, "send_message", send)
        assert cli.main(["reply", str(context_file)]) == 1
        send.assert_not_awaited()

    def test_reply(self, context_file, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        send = AsyncMock(return_value="ur the coolest!!!")
        monkeypatch.setattr(ClaudeReplyService, "send_message", send)

        assert cli.main(["reply", str(context_file)]) == 0

        send.assert_awaited_once()
        (prompt,), _ = send.await_args
        assert prompt.startswith("Your name is Dave. ")
        assert (context_file.parent / "data").is_dir()
