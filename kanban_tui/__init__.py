"""kanban-tui - navigation core and terminal shell for a kanban board."""

__version__ = "0.1.0"
