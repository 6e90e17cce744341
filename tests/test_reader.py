import builtins
import readline

from rerun.modules.term import LineReader


def test_read_line_uses_prompt(monkeypatch):
    seen = []

    def fake_input(prompt):
        seen.append(prompt)
        return "ls -l"

    monkeypatch.setattr(builtins, "input", fake_input)
    reader = LineReader()
    reader.set_prompt("> cmd ")
    assert reader.read_line() == "ls -l"
    assert seen == ["> cmd "]


def test_read_line_end_of_input(monkeypatch):
    def eof(prompt):
        raise EOFError

    def interrupt(prompt):
        raise KeyboardInterrupt

    reader = LineReader()
    monkeypatch.setattr(builtins, "input", eof)
    assert reader.read_line() is None
    monkeypatch.setattr(builtins, "input", interrupt)
    assert reader.read_line() is None


def test_history_round_trip():
    readline.clear_history()
    reader = LineReader(history_length=0)
    reader.add_history("one")
    reader.add_history("two 'three'")
    assert reader.history() == ["one", "two 'three'"]
    readline.clear_history()
