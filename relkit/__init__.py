"""relkit: release automation for npm packages kept in git."""

__version__ = "0.1.0"
