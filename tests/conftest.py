"""Shared fixtures for the bindery test suite."""

from __future__ import annotations

import io

import pytest

from bindery import messages as m


@pytest.fixture
def console():
    """Capture everything the messages layer prints, as plain text."""
    fh = io.StringIO()
    with m.withMessageState(fh=fh, printMode="plain", printOn="everything", silent=False):
        yield fh

