"""Shared test fixtures for pygwrap tests."""

import os
import stat
import sys
import textwrap

import pytest


@pytest.fixture
def make_stub(tmp_path):
    """Factory writing an executable Python script that stands in for pygmentize.

    Usage:
        path = make_stub('sys.stdout.write(sys.stdin.read())')
        Pygments(path).highlight("x", lexer="text")
    """
    counter = {"n": 0}

    def _make(body: str) -> str:
        counter["n"] += 1
        script = tmp_path / f"pygmentize-stub-{counter['n']}"
        script.write_text(
            f"#!{sys.executable}\nimport json\nimport sys\n"
            + textwrap.dedent(body)
            + "\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return os.fspath(script)

    return _make


@pytest.fixture
def echo_stub(make_stub):
    """Stub that copies stdin to stdout unchanged."""
    return make_stub("sys.stdout.write(sys.stdin.read())")


@pytest.fixture
def argv_stub(make_stub):
    """Stub that prints its received arguments as a JSON list."""
    return make_stub("sys.stdout.write(json.dumps(sys.argv[1:]))")


@pytest.fixture
def failing_stub(make_stub):
    """Stub that writes to stderr and exits with status 1."""
    return make_stub("""\
        sys.stderr.write("Error: no lexer for alias 'nope' found\\n")
        sys.exit(1)
    """)


LEXER_LISTING = """\
Pygments version 2.17.2, (c) 2006-2023 by Georg Brandl, Matthäus Chajdas and contributors.

Lexers:
~~~~~~~
* html:
    HTML (filenames *.html, *.htm, *.xhtml, *.xslt)
* python, py, sage, python3, py3:
    Python (filenames *.py, *.pyw, *.pyi, *.jy, *.sage, *.sc, SConstruct, SConscript, *.bzl, BUCK, BUILD, BUILD.bazel, WORKSPACE, *.tac)
* text:
    Text only (filenames *.txt)
"""


@pytest.fixture
def lexer_listing():
    return LEXER_LISTING
