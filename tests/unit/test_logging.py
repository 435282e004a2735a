"""setup_default_logging: package log level plus a handler when none exists."""

import logging

import pytest

from hypermesh.common.logging import PACKAGE_LOGGER, setup_default_logging


@pytest.fixture()
def bare_root(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", logging.WARNING)
    return root


@pytest.fixture(autouse=True)
def restore_package_level():
    package = logging.getLogger(PACKAGE_LOGGER)
    level = package.level
    yield
    package.setLevel(level)


def test_bare_root_gets_a_handler(bare_root):
    package = setup_default_logging("debug")
    assert package is logging.getLogger(PACKAGE_LOGGER)
    assert len(bare_root.handlers) == 1
    assert package.level == logging.DEBUG
    # Only the package is made verbose
    assert bare_root.level == logging.WARNING


def test_existing_handlers_are_kept(monkeypatch):
    root = logging.getLogger()
    handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [handler])
    setup_default_logging(logging.DEBUG)
    assert root.handlers == [handler]
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG


def test_module_loggers_follow_package_level(bare_root):
    setup_default_logging("info")
    child = logging.getLogger("hypermesh.core.operators.cross_section")
    assert child.isEnabledFor(logging.INFO)
    assert not child.isEnabledFor(logging.DEBUG)


def test_unknown_level_name_falls_back_to_info(bare_root):
    package = setup_default_logging("chatty")
    assert package.level == logging.INFO
