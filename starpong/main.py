import argparse

from starpong.config import MAX_BALLS, VARIANTS


def build_parser():
    parser = argparse.ArgumentParser(
        prog='starpong',
        description='Star Pong - two paddles, up to three balls',
    )
    parser.add_argument(
        '--variant', '-v',
        choices=VARIANTS,
        default='pong',
        help='pong: classic paddles, spin: rotating paddle demo',
    )
    parser.add_argument(
        '--assets', '-a',
        metavar='DIR',
        default=None,
        help='Load sprite images from DIR instead of generating them',
    )
    parser.add_argument(
        '--balls', '-b',
        type=int,
        choices=range(1, MAX_BALLS + 1),
        default=1,
        help='Number of balls in play at start',
    )
    parser.add_argument(
        '--single-player', '-s',
        action='store_true',
        help='Start with the blue paddle on autopilot',
    )
    return parser


def print_controls():
    print("Controls:")
    print("[W] / [S]        Red paddle up/down")
    print("[Up] / [Down]    Blue paddle up/down")
    print("[T]              Toggle single player")
    print("[P]              Reset")
    print("[1] [2] [3]      Number of balls")
    print("[Esc]            Quit")


def main(argv=None):
    args = build_parser().parse_args(argv)

    from starpong.game import Game

    print_controls()
    Game(
        variant=args.variant,
        asset_dir=args.assets,
        ball_count=args.balls,
        single_player=args.single_player,
    ).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
