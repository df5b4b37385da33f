"""deptdir — in-memory department directory with a line-oriented interpreter."""

__version__ = "0.1.0"
