from __future__ import annotations

from lib_config_chain.domain.errors import ConfigError, InvalidChain, InvalidFormat, NotFound


def test_error_hierarchy() -> None:
    assert issubclass(InvalidFormat, ConfigError)
    assert issubclass(NotFound, ConfigError)
    assert issubclass(InvalidChain, ConfigError)
    for exception in (InvalidFormat(""), NotFound(""), InvalidChain("")):
        assert isinstance(exception, ConfigError)
