"""BoardGate - hierarchical authorization for workspaces and boards."""

__version__ = "0.1.0"
