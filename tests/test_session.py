"""Tests for session token loading."""

import pytest

from advent.fetch import Environment, SessionError, forget_session, session_file_for


class TestEnvironment:

    def test_reads_stored_session(self, tmp_path):
        session_file_for(tmp_path).write_text("abc123\n")
        env = Environment.initialise(tmp_path)
        assert env.session == "abc123"
        assert env.cache_dir == tmp_path
        assert env.session_file == tmp_path / "session"

    def test_creates_cache_directory(self, tmp_path):
        cache_dir = tmp_path / "nested" / "inputs"
        env = Environment.initialise(cache_dir, prompt=lambda: "tok")
        assert cache_dir.is_dir()
        assert env.session == "tok"

    def test_prompts_and_persists_missing_session(self, tmp_path):
        """A missing token is asked for once and stored for next time."""
        calls = []

        def prompt():
            calls.append(1)
            return "  from-browser  "

        env = Environment.initialise(tmp_path, prompt=prompt)
        assert env.session == "from-browser"
        assert session_file_for(tmp_path).read_text() == "from-browser"

        again = Environment.initialise(tmp_path, prompt=prompt)
        assert again.session == "from-browser"
        assert len(calls) == 1

    def test_empty_answer_is_an_error(self, tmp_path):
        with pytest.raises(SessionError) as exc_info:
            Environment.initialise(tmp_path, prompt=lambda: "")
        assert "session cookie" in exc_info.value.message
        assert not session_file_for(tmp_path).exists()

    def test_no_prompt_is_an_error(self, tmp_path):
        with pytest.raises(SessionError):
            Environment.initialise(tmp_path)

    def test_empty_session_file_is_an_error(self, tmp_path):
        session_file_for(tmp_path).write_text("\n")
        with pytest.raises(SessionError) as exc_info:
            Environment.initialise(tmp_path, prompt=lambda: "unused")
        assert "empty" in exc_info.value.message

    def test_cache_dir_blocked_by_file(self, tmp_path):
        blocker = tmp_path / "inputs"
        blocker.write_text("not a directory")
        with pytest.raises(SessionError):
            Environment.initialise(blocker, prompt=lambda: "tok")


class TestForgetSession:

    def test_removes_file(self, tmp_path):
        session_file_for(tmp_path).write_text("abc")
        assert forget_session(tmp_path) is True
        assert not session_file_for(tmp_path).exists()

    def test_nothing_to_remove(self, tmp_path):
        assert forget_session(tmp_path) is False
