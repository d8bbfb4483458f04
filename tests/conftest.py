from rsaid.util.beartype import maybe_setup_beartype

# Needs to happen before any test module imports the rest of the package
maybe_setup_beartype(["rsaid"])
