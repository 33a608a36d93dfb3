import argparse
import dataclasses
import sys

from .casemapping import fold_lower, fold_upper
from .exceptions import IrcStringsException
from .formatting import strip_color, strip_formatting
from .masks import matches_mask_many
from .modes import gen_mode_change, join_mode_line, unparse_mode_line
from .numerics import name_to_numeric, numeric_to_name
from .profile import ServerProfile, load_profile
from .specifications import Casemapping


def get_profile(args):
    if args.profile:
        profile = load_profile(args.profile)
    else:
        profile = ServerProfile()
    if args.casemapping:
        profile = dataclasses.replace(
            profile, casemapping=Casemapping.from_name(args.casemapping)
        )
    return profile


def cmd_fold(args, profile):
    fold = fold_lower if args.lower else fold_upper
    print(fold(args.text, profile.casemapping))


def cmd_match(args, profile):
    results = matches_mask_many(args.masks, args.candidates, profile.casemapping)
    for mask in args.masks:
        for candidate in results.get(mask, []):
            print("{}\t{}".format(mask, candidate))
    return 0 if results else 1


def cmd_modes(args, profile):
    mode_line = profile.parse_mode_line(args.tokens, args.args)
    if not mode_line:
        print("Invalid mode line: {}".format(args.tokens), file=sys.stderr)
        return 1
    print(join_mode_line(mode_line))


def cmd_condense(args, profile):
    print(unparse_mode_line(args.tokens))


def cmd_diff(args, profile):
    print(gen_mode_change(args.before, args.after))


def cmd_strip(args, profile):
    print(strip_formatting(strip_color(args.text)))


def cmd_numeric(args, profile):
    if args.numeric.isdigit():
        result = numeric_to_name(args.numeric)
    else:
        result = name_to_numeric(args.numeric)
    if result is None:
        print("Unknown numeric: {}".format(args.numeric), file=sys.stderr)
        return 1
    print(result)


parser = argparse.ArgumentParser(
    prog="python -m ircstrings", description="Manipulate IRC protocol strings."
)
parser.add_argument(
    "--casemapping",
    type=str,
    help="Casemapping to use. Valid values: {}. Defaults to rfc1459.".format(
        ", ".join(x.value for x in Casemapping)
    ),
)
parser.add_argument(
    "--profile", type=str, help="YAML file describing the server's settings."
)
subparsers = parser.add_subparsers(dest="command", required=True)

fold_parser = subparsers.add_parser("fold", help="Fold the case of a string.")
fold_parser.add_argument("text")
fold_parser.add_argument(
    "-l", "--lower", action="store_true", help="Fold to lower case instead of upper."
)
fold_parser.set_defaults(func=cmd_fold)

match_parser = subparsers.add_parser(
    "match", help="Print which candidates match which masks."
)
match_parser.add_argument(
    "-m",
    "--mask",
    dest="masks",
    action="append",
    required=True,
    help="A mask. Use this option multiple times to match several masks.",
)
match_parser.add_argument("candidates", nargs="+")
match_parser.set_defaults(func=cmd_match)

modes_parser = subparsers.add_parser("modes", help="Parse a mode line.")
modes_parser.add_argument("tokens")
modes_parser.add_argument("args", nargs="*")
modes_parser.set_defaults(func=cmd_modes)

condense_parser = subparsers.add_parser(
    "condense", help="Merge consecutive mode changes with the same sign."
)
condense_parser.add_argument("tokens")
condense_parser.set_defaults(func=cmd_condense)

diff_parser = subparsers.add_parser(
    "diff", help="Print the mode change from one set of modes to another."
)
diff_parser.add_argument("before")
diff_parser.add_argument("after")
diff_parser.set_defaults(func=cmd_diff)

strip_parser = subparsers.add_parser(
    "strip", help="Remove color and formatting codes."
)
strip_parser.add_argument("text")
strip_parser.set_defaults(func=cmd_strip)

numeric_parser = subparsers.add_parser(
    "numeric", help="Convert a numeric code to its name, or a name to its code."
)
numeric_parser.add_argument("numeric")
numeric_parser.set_defaults(func=cmd_numeric)


def main(argv=None):
    args = parser.parse_args(argv)
    try:
        profile = get_profile(args)
        return args.func(args, profile) or 0
    except (IrcStringsException, OSError) as e:
        print(e, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
