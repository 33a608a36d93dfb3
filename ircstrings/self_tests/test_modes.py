import pytest

from ircstrings.exceptions import InvalidProfile
from ircstrings.modes import (
    DEFAULT_STATUS_MODES,
    ChannelModes,
    ModeLine,
    coerce_status_modes,
    gen_mode_change,
    join_mode_line,
    parse_mode_line,
    parse_prefix,
    unparse_mode_line,
)


def test_parse_mode_line():
    mode_line = parse_mode_line("ov+b-i", ["Bob", "sue", "stalin*!*@*"])
    assert mode_line.modes == ["+o", "+v", "+b", "-i"]
    assert mode_line.args == ["Bob", "sue", "stalin*!*@*"]
    assert mode_line.as_dict() == {
        "modes": ["+o", "+v", "+b", "-i"],
        "args": ["Bob", "sue", "stalin*!*@*"],
    }
    assert mode_line


def test_parse_mode_line_underflow():
    mode_line = parse_mode_line("ov", [])
    assert mode_line == ModeLine()
    assert mode_line.modes == []
    assert mode_line.args == []
    assert not mode_line


def test_parse_mode_line_partial_underflow():
    assert parse_mode_line("+ntb", []) == ModeLine()
    assert parse_mode_line("+o-v", ["Bob"]) == ModeLine()


# fmt: off
MODE_LINES = [
    # (tokens, args, modes, consumed args)
    ("+nt", [], ["+n", "+t"], []),
    ("nt", [], ["+n", "+t"], []),
    ("+k-k", ["secret"], ["+k", "-k"], ["secret"]),
    ("+l-l", ["42"], ["+l", "-l"], ["42"]),
    ("-b+e", ["*!*@spam", "*!*@ham"], ["-b", "+e"], ["*!*@spam", "*!*@ham"]),
    ("+I", ["*!*@friend"], ["+I"], ["*!*@friend"]),
    ("-h+h", ["alice", "bob"], ["-h", "+h"], ["alice", "bob"]),
    ("+XYZ", [], ["+X", "+Y", "+Z"], []),
    ("+o", ["Bob", "extra"], ["+o"], ["Bob"]),
    ("+-+o", ["Bob"], ["+o"], ["Bob"]),
    ("", [], [], []),
]
# fmt: on


@pytest.mark.parametrize(
    "tokens,args,modes,consumed",
    [pytest.param(*case, id=case[0] or "empty") for case in MODE_LINES],
)
def test_parse_mode_line_table(tokens, args, modes, consumed):
    mode_line = parse_mode_line(tokens, args)
    assert mode_line.modes == modes
    assert mode_line.args == consumed


def test_parse_mode_line_whole_line():
    mode_line = parse_mode_line("+ov-b Bob sue *!*@spam")
    assert mode_line.modes == ["+o", "+v", "-b"]
    assert mode_line.args == ["Bob", "sue", "*!*@spam"]


def test_parse_mode_line_channel_modes():
    # with k always taking an argument, as most servers do
    channel_modes = ChannelModes.from_isupport("beI,k,l,imnpst")
    mode_line = parse_mode_line("-k+l", ["secret", "10"], channel_modes)
    assert mode_line.modes == ["-k", "+l"]
    assert mode_line.args == ["secret", "10"]

    mode_line = parse_mode_line("-k+l", ["secret", "10"])
    assert mode_line.modes == ["-k", "+l"]
    assert mode_line.args == ["secret"]

    mode_line = parse_mode_line("+fq", ["#overflow"], ["beI", "kf", "l", "imnpst"])
    assert mode_line.modes == ["+f", "+q"]
    assert mode_line.args == ["#overflow"]


def test_parse_mode_line_status_modes():
    mode_line = parse_mode_line("+qo", ["alice", "bob"], status_modes="(qov)~@+")
    assert mode_line.modes == ["+q", "+o"]
    assert mode_line.args == ["alice", "bob"]

    mode_line = parse_mode_line("+ov", ["alice"], status_modes="o")
    assert mode_line.modes == ["+o", "+v"]
    assert mode_line.args == ["alice"]

    mode_line = parse_mode_line("+Yo", ["alice", "bob"], status_modes={"Y": "!"})
    assert mode_line.modes == ["+Y", "+o"]
    assert mode_line.args == ["alice"]


def test_mode_line_pairs():
    mode_line = parse_mode_line("+ov-i+l", ["Bob", "sue", "5"])
    assert list(mode_line.pairs()) == [
        ("+", "o", "Bob"),
        ("+", "v", "sue"),
        ("-", "i", None),
        ("+", "l", "5"),
    ]


def test_join_mode_line():
    mode_line = parse_mode_line("+o+v-b", ["Bob", "sue", "*!*@spam"])
    assert join_mode_line(mode_line) == "+ov-b Bob sue *!*@spam"
    assert join_mode_line(parse_mode_line("+nt", [])) == "+nt"
    assert join_mode_line(ModeLine()) == ""


# fmt: off
CONDENSATIONS = [
    ("+o+o+o-v+v", "+ooo-v+v"),
    ("+n+t", "+nt"),
    ("nt", "+nt"),
    ("+n-t-s+i", "+n-ts+i"),
    ("-o-o", "-oo"),
    ("+-+n", "+n"),
    ("+n-", "+n"),
    ("+", ""),
    ("", ""),
    ("+o+v Bob sue", "+ov Bob sue"),
]
# fmt: on


@pytest.mark.parametrize(
    "tokens,expected",
    [
        pytest.param(tokens, expected, id=tokens or "empty")
        for (tokens, expected) in CONDENSATIONS
    ],
)
def test_unparse_mode_line(tokens, expected):
    assert unparse_mode_line(tokens) == expected


def test_unparse_mode_line_keeps_duplicates():
    assert unparse_mode_line("+o+o") == "+oo"


# fmt: off
MODE_CHANGES = [
    # (before, after, change)
    ("abcde", "befmZ", "-acd+fmZ"),
    ("", "nt", "+nt"),
    ("nt", "", "-nt"),
    ("nt", "tn", ""),
    ("ntt", "nts", "+s"),
    ("+nt", "+ns", "-t+s"),
]
# fmt: on


@pytest.mark.parametrize(
    "before,after,change",
    [pytest.param(*case, id=f"{case[0]}-{case[1]}") for case in MODE_CHANGES],
)
def test_gen_mode_change(before, after, change):
    assert gen_mode_change(before, after) == change


@pytest.mark.parametrize("modes", ["", "n", "imnpst", "abcde", "ZzYy"])
def test_gen_mode_change_same(modes):
    assert gen_mode_change(modes, modes) == ""


def test_gen_mode_change_none():
    assert gen_mode_change(None, "nt") == "+nt"
    assert gen_mode_change("nt", None) == "-nt"
    assert gen_mode_change(None, None) == ""


def test_channel_modes_defaults():
    channel_modes = ChannelModes()
    assert channel_modes.to_isupport() == "beI,,kl,imnpstaqr"
    assert channel_modes.takes_argument("+", "b")
    assert channel_modes.takes_argument("-", "b")
    assert channel_modes.takes_argument("+", "k")
    assert not channel_modes.takes_argument("-", "k")
    assert not channel_modes.takes_argument("+", "n")


def test_channel_modes_from_isupport():
    assert ChannelModes.from_isupport("b,k,l,imnpst") == ChannelModes(
        "b", "k", "l", "imnpst"
    )
    assert ChannelModes.from_isupport("b,k") == ChannelModes("b", "k", "", "")
    assert ChannelModes.from_isupport("b,k,l,imnpst,XYZ") == ChannelModes(
        "b", "k", "l", "imnpst"
    )


def test_channel_modes_coerce():
    assert ChannelModes.coerce(None) == ChannelModes()
    assert ChannelModes.coerce(["b", "k", "l", "n"]) == ChannelModes("b", "k", "l", "n")
    with pytest.raises(InvalidProfile):
        ChannelModes.coerce(["b", "k"])


def test_parse_prefix():
    assert parse_prefix("(ohv)@%+") == {"o": "@", "h": "%", "v": "+"}
    assert parse_prefix("") == {}
    with pytest.raises(InvalidProfile):
        parse_prefix("ohv@%+")
    with pytest.raises(InvalidProfile):
        parse_prefix("(ohv)@%")


def test_coerce_status_modes():
    assert coerce_status_modes(None) == {"o": "@", "h": "%", "v": "+"}
    assert coerce_status_modes(None) is DEFAULT_STATUS_MODES
    assert list(coerce_status_modes("qo")) == ["q", "o"]
    assert coerce_status_modes({"y": "!"}) == {"y": "!"}
