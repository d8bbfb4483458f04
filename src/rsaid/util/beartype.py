import os

from rsaid.util.config import IdSettings


class BearSettings(IdSettings):
    use_beartype: bool = False


def maybe_setup_beartype(packages: list[str] = ["rsaid"]) -> None:
    """
    Optionally use beartype to pick up typing violations during testing (assuming APP_USE_BEARTYPE is set to True
    otherwise). Must be called before the packages are imported.
    """
    if os.environ.get("PYTEST_VERSION") is not None or BearSettings().use_beartype:
        from beartype.claw import beartype_packages

        beartype_packages(packages)
