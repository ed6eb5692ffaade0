def test_is_true_in_env(monkeypatch):
    from assoc_collections.options import is_true_in_env

    monkeypatch.setenv("ASSOC_SOME_FLAG", "1")
    assert is_true_in_env("ASSOC_SOME_FLAG")
    monkeypatch.setenv("ASSOC_SOME_FLAG", "true")
    assert is_true_in_env("ASSOC_SOME_FLAG")
    monkeypatch.setenv("ASSOC_SOME_FLAG", "0")
    assert not is_true_in_env("ASSOC_SOME_FLAG")
    monkeypatch.delenv("ASSOC_SOME_FLAG")
    assert not is_true_in_env("ASSOC_SOME_FLAG")


def test_int_from_env(monkeypatch):
    from assoc_collections.options import int_from_env

    monkeypatch.setenv("ASSOC_SOME_INT", "2")
    assert int_from_env("ASSOC_SOME_INT", 0) == 2
    monkeypatch.setenv("ASSOC_SOME_INT", "not int")
    assert int_from_env("ASSOC_SOME_INT", 0) == 0
    monkeypatch.delenv("ASSOC_SOME_INT")
    assert int_from_env("ASSOC_SOME_INT", 1) == 1


def test_options_from_args():
    from assoc_collections.options import BaseOptions

    class Args(object):
        verbose = 2
        log_file = "/tmp/assoc.log"
        CHECK_INVARIANTS = True
        unrelated = "ignored"

    options = BaseOptions(Args())
    assert options.verbose == 2
    assert options.log_file == "/tmp/assoc.log"
    assert options.CHECK_INVARIANTS
    assert not hasattr(options, "unrelated")

    # Defaults are kept when no args are given.
    assert BaseOptions().verbose == BaseOptions.verbose
