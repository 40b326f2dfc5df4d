import runpy
import sys

import pytest


def test_python_m_depgraph_help(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["depgraph", "--help"])
    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("depgraph", run_name="__main__")
    assert exc_info.value.code == 0
    assert "analyze" in capsys.readouterr().out
