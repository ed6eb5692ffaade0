import os
from typing import Optional


def is_true_in_env(env_key):
    """
    :param str env_key:

    :return bool:
        True if the given key is to be considered to have a value which is to be
        considered True and False otherwise.
    """
    return os.getenv(env_key, "") in ("1", "True", "true")


def int_from_env(env_key, default):
    try:
        return int(os.environ.get(env_key, default))
    except ValueError:
        return default


# Options which must be set as environment variables.
ENV_OPTION_ASSOC_CHECK_INVARIANTS = "ASSOC_CHECK_INVARIANTS"

ENV_OPTION_ASSOC_LOG_LEVEL = "ASSOC_LOG_LEVEL"

ENV_OPTION_ASSOC_LOG_FILE = "ASSOC_LOG_FILE"


class BaseOptions(object):
    log_file: Optional[str] = os.environ.get(ENV_OPTION_ASSOC_LOG_FILE) or None
    verbose: int = int_from_env(ENV_OPTION_ASSOC_LOG_LEVEL, 0)

    # When set, each dict created by an operation checks that its keys are
    # unique (quadratic: only meant for debugging a misbehaving `equals`).
    CHECK_INVARIANTS = is_true_in_env(ENV_OPTION_ASSOC_CHECK_INVARIANTS)

    def __init__(self, args=None):
        """
        :param args:
            Instance with options to set (usually args from argparse).
        """
        if args is not None:
            for attr in dir(self):
                if not attr.startswith("_"):
                    if hasattr(args, attr):
                        setattr(self, attr, getattr(args, attr))


class Setup(object):
    # Replaced when the options are customized (i.e.: in tests).
    options = BaseOptions()
