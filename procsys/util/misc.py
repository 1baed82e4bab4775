from dacite import Config


def str_hook(v: str | None):
    if v is None:
        return ""
    return str(v)


def int_hook(v: int | None):
    if v is None:
        return 0  # field failed to parse or was not present
    return int(v)


def dacite_config() -> Config:
    """
    Return the dacite config used to build records from parsed sysfs values.
    """
    return Config(
        type_hooks={str: str_hook, int: int_hook},
        strict=False,
    )
