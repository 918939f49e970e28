import json

import pytest

from follownet.loader import FixtureError, build_network, load_network
from follownet.outcome import Outcome


def _write_fixture(tmp_path, data):
    path = tmp_path / "network.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_build_network_from_fixture():
    report = build_network({
        "max_users": 5,
        "users": ["Foo", "Bar", "Baz"],
        "follows": [["Foo", "Bar"], ["Foo", "Baz"], ["Bar", "Baz"]],
    })
    assert report.ok
    network = report.network
    assert network.max_users == 5
    assert network.get_user_count() == 3
    assert network.get_user("Foo").followees == ("Bar", "Baz")
    assert network.most_popular_user() == "Baz"


def test_rejections_are_collected():
    report = build_network({
        "max_users": 2,
        "max_followees": 1,
        "users": ["Foo", "foo", "Bar", "Baz"],
        "follows": [["Foo", "Bar"], ["Foo", "Foo"], ["Bar", "Ghost"], ["Bar", "Foo"], ["Foo", "Bar"]],
    })
    assert not report.ok
    outcomes = [(r.action, r.args, r.outcome) for r in report.rejections]
    assert outcomes == [
        ("user", ("foo",), Outcome.DUPLICATE_USER),
        ("user", ("Baz",), Outcome.AT_CAPACITY),
        ("follow", ("Foo", "Foo"), Outcome.SELF_FOLLOW),
        ("follow", ("Bar", "Ghost"), Outcome.UNKNOWN_USER),
        ("follow", ("Foo", "Bar"), Outcome.ALREADY_FOLLOWING),
    ]
    assert report.rejections[0].describe() == "foo: user already exists"
    assert report.rejections[3].describe() == "Bar -> Ghost: no such user"
    assert str(report.network) == "Network:\nFoo -> Bar\nBar -> Foo"


def test_capacity_defaults_and_overrides():
    report = build_network({"users": ["Foo", "Bar"]})
    assert report.network.max_users == 2
    assert report.network.max_followees == 10

    report = build_network({"max_users": 2, "users": ["Foo", "Bar", "Baz"]}, max_users=3)
    assert report.ok
    assert report.network.get_user_count() == 3


def test_malformed_fixtures_raise():
    with pytest.raises(FixtureError):
        build_network(["Foo"])
    with pytest.raises(FixtureError):
        build_network({"users": "Foo"})
    with pytest.raises(FixtureError):
        build_network({"users": ["Foo"], "follows": [["Foo"]]})
    with pytest.raises(FixtureError):
        build_network({"users": ["Foo"], "max_users": -1})


def test_load_network_from_file(tmp_path):
    path = _write_fixture(tmp_path, {
        "users": ["Foo", "Bar", "Baz", "Qux"],
        "follows": [["Foo", "Qux"], ["Bar", "Qux"], ["Baz", "Qux"]],
    })
    report = load_network(path)
    assert report.ok
    assert report.network.most_popular_user() == "Qux"


def test_load_network_bad_file(tmp_path):
    with pytest.raises(FixtureError):
        load_network(tmp_path / "missing.json")

    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(FixtureError) as excinfo:
        load_network(path)
    assert excinfo.value.__cause__ is not None


def test_zero_and_boolean_capacities_raise():
    with pytest.raises(FixtureError):
        build_network({"max_users": 0, "users": ["Foo", "Bar"]})
    with pytest.raises(FixtureError):
        build_network({"max_followees": 0, "users": ["Foo"]})
    with pytest.raises(FixtureError):
        build_network({"users": ["Foo"]}, max_users=0)
    with pytest.raises(FixtureError):
        build_network({"max_users": True, "users": ["Foo"]})
