"""Share message — invite text for the SMS bridge."""

from ignite.core.share_message import build_share_message, build_spark_url


def _message(**overrides):
    args = dict(
        creator_name="Nova", spark_title="Community Garden", raised=10, goal=20,
        backer_count=1, quorum=3, spark_url="https://ignite.example?spark=s1",
    )
    args.update(overrides)
    return build_share_message(**args)


def test_message_mentions_creator_and_title():
    assert 'Nova invited you to back "Community Garden" on Ignite!' in _message()


def test_message_reports_progress_and_needed_backers():
    assert "50% funded · 1 backers · Needs 2 more to ignite" in _message()


def test_needed_backers_never_negative():
    assert "Needs 0 more to ignite" in _message(backer_count=5)


def test_message_ends_with_link():
    assert _message().endswith("\nhttps://ignite.example?spark=s1")


def test_spark_url_strips_trailing_slash():
    assert build_spark_url("https://ignite.example/", "s1") == "https://ignite.example?spark=s1"
