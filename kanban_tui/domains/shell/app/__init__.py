"""Shell application: Textual app, keybinding persistence and help text."""
