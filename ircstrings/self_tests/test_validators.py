import pytest

from ircstrings.validators import is_valid_chan_name, is_valid_nick_name


@pytest.mark.parametrize(
    "nick",
    ["foo", "Foo-Bar", "[away]", "^caret", "_under", "`tick", "{x}|y", "a123"],
)
def test_valid_nick(nick):
    assert is_valid_nick_name(nick)


@pytest.mark.parametrize(
    "nick", ["", "1abc", "-dash", "foo bar", "foo!bar", "foo@bar", "#chan", "fö", None]
)
def test_invalid_nick(nick):
    assert not is_valid_nick_name(nick)


@pytest.mark.parametrize(
    "channel", ["#foo", "&local", "#Foo-Bar.baz", "##", "#ünïcödé", "#" + "x" * 199]
)
def test_valid_channel(channel):
    assert is_valid_chan_name(channel)


@pytest.mark.parametrize(
    "channel",
    [
        "",
        "#",
        "foo",
        "+modeless",
        "#foo bar",
        "#foo,#bar",
        "#foo:bar",
        "#foo\x07",
        "#foo\r\n",
        "#" + "x" * 200,
        "#" + "é" * 100,
        None,
    ],
)
def test_invalid_channel(channel):
    assert not is_valid_chan_name(channel)


def test_channel_chantypes():
    assert is_valid_chan_name("+modeless", ["#", "+"])
    assert not is_valid_chan_name("&local", ["#", "+"])
    assert is_valid_chan_name("!12345chan", "!")
    assert not is_valid_chan_name("#foo", [])
