from __future__ import annotations

import nox

PYTHONS = ["3.10", "3.11", "3.12", "3.13"]


@nox.session(python=PYTHONS)
def tests(session):
    # Note: we use 'uv' instead of 'pip' to make setup quicker
    # '--active' and 'external=True' are needed for proper setup
    session.run("uv", "sync", "--active", external=True)
    session.run("uv", "run", "--active", "pytest", external=True)


@nox.session(python=PYTHONS)
def examples(session):
    """Run the example smoke tests with the example dependencies."""
    session.run("uv", "sync", "--active", "--group", "examples", external=True)
    session.run("uv", "run", "--active", "pytest", "tests/e_examples/", external=True)
