"""Basic import tests to verify package structure."""


def test_import_invasion():
    """Verify main package imports."""
    import invasion
    assert invasion.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from invasion import core
    assert hasattr(core, "WorldMap")
    assert hasattr(core, "Simulation")


def test_import_io():
    """Verify io module structure exists."""
    from invasion import io
    assert hasattr(io, "read_map")


def test_import_cli():
    """Verify the console entry point exists."""
    from invasion import cli
    assert callable(cli.main)
