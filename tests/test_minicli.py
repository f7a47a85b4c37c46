from utilkit.minicli import CliArgument, CliParser


def recorder():
    calls = []

    def callback(args, user_data):
        calls.append((args, user_data))

    return calls, callback


def test_registration():
    parser = CliParser("prog", "a test program")
    _, cb = recorder()
    parser.add_argument(CliArgument("--help", cb, shorthand="-h"))
    parser.add_argument(CliArgument("--version", cb))
    assert parser.is_registered("--help")
    assert parser.is_registered("-h")
    assert parser.is_registered("--version")
    assert not parser.is_registered("-v")
    assert [a.name for a in parser.arguments] == ["--help", "--version"]


def test_parse_passes_remaining_args_and_user_data():
    parser = CliParser("prog")
    calls, cb = recorder()
    arg = CliArgument("--run", cb, user_data={"mode": "fast"})
    parser.add_argument(arg)
    matched = parser.parse(["prog", "--run", "x", "y"])
    assert matched is arg
    assert calls == [(["x", "y"], {"mode": "fast"})]


def test_parse_shorthand():
    parser = CliParser("prog")
    calls, cb = recorder()
    arg = CliArgument("--file", cb, shorthand="-f")
    parser.add_argument(arg)
    matched = parser.parse(["prog", "-f", "data.txt"])
    assert matched is arg
    assert calls == [(["data.txt"], None)]


def test_parse_skips_program_name():
    parser = CliParser("prog")
    calls, cb = recorder()
    parser.add_argument(CliArgument("--go", cb))
    assert parser.parse(["--go"]) is None
    assert calls == []


def test_parse_stops_at_first_match():
    parser = CliParser("prog")
    first_calls, first = recorder()
    second_calls, second = recorder()
    parser.add_argument(CliArgument("--a", first))
    parser.add_argument(CliArgument("--b", second))
    matched = parser.parse(["prog", "junk", "--b", "--a"])
    assert matched.name == "--b"
    assert second_calls == [(["--a"], None)]
    assert first_calls == []


def test_parse_no_match():
    parser = CliParser("prog")
    calls, cb = recorder()
    parser.add_argument(CliArgument("--x", cb))
    assert parser.parse(["prog", "--y"]) is None
    assert calls == []