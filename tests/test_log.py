from unittest.mock import patch

from docker_engine_mcp import log


@patch("docker_engine_mcp.log.logging.basicConfig")
def test_configure_logging_uses_name_prefixed_format(mock_basic_config):
    with patch.object(log, "_configured", False):
        log.configure_logging("debug")

    kwargs = mock_basic_config.call_args.kwargs
    assert kwargs["format"] == "[%(name)s] %(message)s"
    assert kwargs["level"] == log.logging.DEBUG


@patch("docker_engine_mcp.log.logging.basicConfig")
def test_configure_logging_twice_only_adjusts_level(mock_basic_config):
    root = log.logging.getLogger()
    previous = root.level
    try:
        with patch.object(log, "_configured", True):
            log.configure_logging("warning")
        assert root.level == log.logging.WARNING
    finally:
        root.setLevel(previous)

    mock_basic_config.assert_not_called()
