from ircstrings.specifications import Casemapping


def pytest_addoption(parser):
    """Called by pytest, registers CLI options passed to the pytest command."""
    parser.addoption(
        "--casemapping",
        action="append",
        default=[],
        help="Casemapping to run casemapping-dependent tests with. "
        "May be given multiple times; defaults to all of them.",
    )


def pytest_generate_tests(metafunc):
    """Called by pytest for each test function; parametrizes tests taking
    a ``casemapping`` argument over the selected casemappings."""
    if "casemapping" not in metafunc.fixturenames:
        return
    names = metafunc.config.getoption("casemapping")
    if names:
        casemappings = [Casemapping.from_name(name) for name in names]
    else:
        casemappings = list(Casemapping)
    metafunc.parametrize(
        "casemapping", casemappings, ids=[x.value for x in casemappings]
    )
