import io
import os


def test_log(tmpdir):
    from assoc_collections.assoc_log import (
        close_logging_streams,
        configure_logger,
        get_logger,
    )

    somedir = str(tmpdir.join("somedir"))
    with configure_logger("test", 2, os.path.join(somedir, "foo.log")):
        log = get_logger("my_logger")
        log.info("something\nfoo\nbar")

        try:
            raise AssertionError("someerror")
        except AssertionError:
            log.exception("rara: %s - %s", "str1", "str2")
        close_logging_streams()

    log_files = [
        x for x in os.listdir(somedir) if x.startswith("foo") and x.endswith(".log")
    ]
    assert log_files == ["foo.test.%s.log" % (os.getpid(),)]

    with open(os.path.join(somedir, log_files[0]), "r") as stream:
        contents = stream.read()
        assert "someerror" in contents
        assert "something" in contents
        assert "rara: str1 - str2" in contents
        assert "test: " in contents
        assert "EXCEPTION - my_logger" in contents


def test_log_levels():
    from assoc_collections.assoc_log import configure_logger, get_logger, get_log_level

    log = get_logger("test_log_levels")
    assert get_logger("test_log_levels") is log

    for level, expected in (
        (0, ["critical"]),
        (1, ["critical", "info", "warning"]),
        (2, ["critical", "info", "warning", "debug"]),
    ):
        s = io.StringIO()
        with configure_logger("levels", level, s):
            assert get_log_level() == level
            log.critical("critical")
            log.info("info")
            log.warning("warning")
            log.debug("debug")
        found = [
            line for line in s.getvalue().splitlines() if line and ": " not in line
        ]
        assert found == expected


def test_log_restores_config():
    from assoc_collections.assoc_log import configure_logger, get_log_level

    initial = get_log_level()
    with configure_logger("restore", 0, io.StringIO()):
        assert get_log_level() == 0
    assert get_log_level() == initial


def test_log_does_not_fail_on_bad_format():
    from assoc_collections.assoc_log import configure_logger, get_logger

    s = io.StringIO()
    with configure_logger("bad_format", 2, s):
        get_logger("bad_format").info("%s %s", "only one")
    assert "%s %s - ('only one',)" in s.getvalue()


def test_log_trims_big_messages():
    from assoc_collections import assoc_log

    s = io.StringIO()
    with assoc_log.configure_logger("trim", 2, s):
        assoc_log.get_logger("trim").debug("x" * (assoc_log.MAX_LOG_MSG_SIZE * 2))
    assert "<trimmed %s to" % (assoc_log.MAX_LOG_MSG_SIZE * 2,) in s.getvalue()
