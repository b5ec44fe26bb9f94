import argparse


def build_parser():
    parser = argparse.ArgumentParser(description='Spaceballs: shrinking shapes drifting across a window')
    parser.add_argument('--seed', type=int, default=None, metavar='N',
                        help='random seed (default: entropy-seeded)')
    parser.add_argument(
        "--log_level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: INFO)",
    )
    return parser

'''
usage: python scripts/main.py --seed 42 --log_level DEBUG
'''
