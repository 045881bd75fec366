"""Tests for command-line parsing."""

import pytest

from starpong.main import build_parser


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.variant == 'pong'
        assert args.assets is None
        assert args.balls == 1
        assert not args.single_player

    def test_all_options(self):
        args = build_parser().parse_args(
            ['--variant', 'spin', '--assets', 'sprites', '--balls', '3', '--single-player'])
        assert args.variant == 'spin'
        assert args.assets == 'sprites'
        assert args.balls == 3
        assert args.single_player

    @pytest.mark.parametrize("argv", [
        ['--balls', '4'],
        ['--balls', '0'],
        ['--variant', 'rotate'],
    ])
    def test_rejects_bad_values(self, argv):
        with pytest.raises(SystemExit):
            build_parser().parse_args(argv)
