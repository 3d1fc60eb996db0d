"""Sprint generation and task allocation engine for project dashboards."""

__version__ = "0.1.0"
