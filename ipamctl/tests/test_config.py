import logging

import pytest

from ipamctl.config import Config
from ipamctl.logging import setup_logger
from ipamctl.networking.capacity import ReservedIPPolicy


def test_reserved_ip_policy(monkeypatch):
    monkeypatch.setattr(Config, "RESERVED_IPS_REDUCE_CAPACITY", False)
    assert Config.reserved_ip_policy() == ReservedIPPolicy.IGNORE
    monkeypatch.setattr(Config, "RESERVED_IPS_REDUCE_CAPACITY", True)
    assert Config.reserved_ip_policy() == ReservedIPPolicy.SUBTRACT


def test_validate_rejects_bad_port(monkeypatch):
    monkeypatch.setattr(Config, "WEBHOOK_PORT", 70000)
    with pytest.raises(ValueError):
        Config.validate()


def test_validate_requires_cert_and_key_together(monkeypatch):
    monkeypatch.setattr(Config, "WEBHOOK_PORT", 9898)
    monkeypatch.setattr(Config, "WEBHOOK_CERT_FILE", "/etc/webhook/tls.crt")
    monkeypatch.setattr(Config, "WEBHOOK_KEY_FILE", None)
    with pytest.raises(ValueError):
        Config.validate()

    monkeypatch.setattr(Config, "WEBHOOK_KEY_FILE", "/etc/webhook/tls.key")
    Config.validate()


def test_setup_logger_adds_single_handler():
    logger = setup_logger("ipamctl.tests.logger", logging.DEBUG)
    setup_logger("ipamctl.tests.logger", logging.DEBUG)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
