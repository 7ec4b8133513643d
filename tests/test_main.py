import io

import pytest
from rich.console import Console

from kitchen import config
from kitchen.main import main, parse_args


def run_main(argv: list[str], cfg: config.Config | None = None) -> str:
    out = io.StringIO()
    cfg = config.Config() if cfg is None else cfg
    assert main(argv, console=Console(file=out, width=120), cfg=cfg) == 0
    return out.getvalue()


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.demo == "all"
    assert args.name is None
    assert not args.ready
    assert not args.keep_person_goal


def test_parse_args_bad_demo() -> None:
    with pytest.raises(SystemExit):
        parse_args(["soup"])


def test_closures() -> None:
    got = run_main(["closures"])
    assert got.count("I am the number 10") == 10
    assert "I am the number 0" in got
    assert "mystery chef" not in got


def test_chef() -> None:
    got = run_main(["chef", "--name", "X"])
    assert "I am the number" not in got
    assert "\nX\n" in got
    assert "All I do is Make awesome food" in got
    assert "Bacon" not in got


def test_chef_ready() -> None:
    got = run_main(["chef", "--ready"])
    assert "You add Bacon" in got


def test_chef_ready_from_config() -> None:
    got = run_main(["chef"], config.Config(world_ready=True, chef_name="Y"))
    assert "You add Bacon" in got
    assert "\nY\n" in got


def test_chef_keep_person_goal() -> None:
    got = run_main(["chef", "--keep-person-goal"])
    assert "All I do is Get money, get paid" in got


def test_all() -> None:
    got = run_main([])
    assert "By Reference" in got
    assert "By Value" in got
    assert "Gordon ******" in got


def test_chef_name_with_emoji_code() -> None:
    got = run_main(["chef", "--name", "Chef :pizza:"])
    assert "\nChef :pizza:\n" in got
