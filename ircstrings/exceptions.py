class IrcStringsException(Exception):
    pass


class InvalidCasemapping(IrcStringsException, ValueError):
    def __str__(self) -> str:
        return "Invalid casemapping: {!r}".format(self.args[0])


class InvalidProfile(IrcStringsException, ValueError):
    def __str__(self) -> str:
        return "Invalid server profile: {}".format(self.args[0])
