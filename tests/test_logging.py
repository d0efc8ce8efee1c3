"""Tests for dotman logging functionality."""

import logging
from collections.abc import Iterator

import pytest
import structlog
from pytest_mock import MockerFixture

import dotman.logging as logging_module
from dotman.logging import (
    cli_renderer,
    configure_logging,
    filter_context_by_prefix,
    format_context_yaml,
    get_logger,
    strip_prefixes_from_keys,
)


@pytest.fixture(autouse=True)
def restore_root_level() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestFormatContextYaml:
    """Tests for format_context_yaml function."""

    def test_format_context_yaml_empty(self) -> None:
        """Test formatting an empty event dict."""
        assert format_context_yaml({}, indent=0) == ''

    def test_format_context_yaml_with_data(self) -> None:
        """Test formatting an event dict with data."""
        result = format_context_yaml({'path': '/usr/local/share/dotman/nvim', 'returncode': 1}, indent=2)

        assert 'path: /usr/local/share/dotman/nvim' in result
        assert 'returncode: 1' in result
        assert result.startswith('  ')


class TestFilterContextByPrefix:
    """Tests for filter_context_by_prefix function."""

    def test_filter_verbose_prefix(self) -> None:
        """Test filtering _verbose_ and _debug_ keys in non-verbose mode."""
        event_dict = {
            '_verbose_replaced': 'directory',
            'target': '/home/u/.config/nvim',
            '_debug_command': 'git clone',
        }

        assert filter_context_by_prefix(event_dict) == {'target': '/home/u/.config/nvim'}

    def test_filter_no_prefixes(self) -> None:
        event_dict = {'key1': 'value1', 'key2': 'value2'}
        assert filter_context_by_prefix(event_dict) == event_dict


class TestStripPrefixesFromKeys:
    """Tests for strip_prefixes_from_keys function."""

    def test_strips_known_prefixes(self) -> None:
        event_dict = {'_verbose_config': {'a': 1}, '_debug_command': 'git', 'plain': True}

        assert strip_prefixes_from_keys(event_dict) == {
            'config': {'a': 1},
            'command': 'git',
            'plain': True,
        }


class TestCliRenderer:
    """Tests for cli_renderer."""

    def test_prints_event_and_drops_it(self, mocker: MockerFixture) -> None:
        mock_console = mocker.patch.object(logging_module, 'console')
        logging.getLogger().setLevel(logging.INFO)

        with pytest.raises(structlog.DropEvent):
            cli_renderer(
                mocker.Mock(),
                'info',
                {'event': 'linked', 'target': '/cfg/nvim', '_verbose_replaced': 'file', 'level': 'info'},
            )

        first_line = mock_console.print.call_args_list[0].args[0]
        assert 'INFO' in first_line
        assert 'linked' in first_line
        assert mock_console.print.call_count == 2
        syntax = mock_console.print.call_args_list[1].args[0]
        assert 'target: /cfg/nvim' in syntax.code
        assert 'replaced' not in syntax.code

    def test_verbose_shows_prefixed_context(self, mocker: MockerFixture) -> None:
        mock_console = mocker.patch.object(logging_module, 'console')
        logging.getLogger().setLevel(logging.DEBUG)

        with pytest.raises(structlog.DropEvent):
            cli_renderer(mocker.Mock(), 'debug', {'event': 'linked', '_verbose_replaced': 'file'})

        syntax = mock_console.print.call_args_list[1].args[0]
        assert 'replaced: file' in syntax.code

    def test_no_context_prints_single_line(self, mocker: MockerFixture) -> None:
        mock_console = mocker.patch.object(logging_module, 'console')

        with pytest.raises(structlog.DropEvent):
            cli_renderer(mocker.Mock(), 'warning', {'event': 'something'})

        mock_console.print.assert_called_once()


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.parametrize(('verbose', 'level'), [(True, logging.DEBUG), (False, logging.INFO)])
    def test_sets_root_level(self, verbose: bool, level: int) -> None:
        configure_logging(verbose=verbose)
        assert logging.getLogger().level == level

    def test_events_are_rendered_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False)

        get_logger('dotman.test').info('repo_installed', name='nvim-config')
        get_logger('dotman.test').debug('hidden_event')

        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'repo_installed' in captured.err
        assert 'nvim-config' in captured.err
        assert 'hidden_event' not in captured.err
